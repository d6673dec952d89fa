#!/usr/bin/env python3
"""
OverlayTheme - Main entry point.

Launches the theme preferences dialog.
"""

import sys

from overlaytheme.main import main


if __name__ == "__main__":
    sys.exit(main())
