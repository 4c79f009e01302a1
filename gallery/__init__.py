"""Theme gallery: generate and validate theme listing pages."""

__version__ = "0.1.0"
