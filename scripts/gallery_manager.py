#!/usr/bin/env python3
"""Gallery Management CLI

Runs the gallery manager from a source checkout without installing the
package. See ``gallery/management/gallery_manager.py`` for the commands.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from gallery.management.gallery_manager import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
