# MIT License (see LICENSE)
"""Entry point for ``python -m physics_playground``."""
import sys

from .app import main

sys.exit(main())
