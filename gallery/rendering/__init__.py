"""Listing and catalog rendering."""
from gallery.rendering.engine import RenderingEngine, markdown_cell

__all__ = ["RenderingEngine", "markdown_cell"]
