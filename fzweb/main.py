#!/usr/bin/env python3
"""
Main entry point for fzweb, used by the console script.
"""

import sys
from fzweb.cli import main


if __name__ == "__main__":
    sys.exit(main())
