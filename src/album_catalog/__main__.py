"""Allow running the demo with ``python -m album_catalog``."""

import sys

from album_catalog.main import main

sys.exit(main())
