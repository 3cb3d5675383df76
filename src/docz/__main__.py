#!/usr/bin/env python3
"""Entry point for running docz as a module.

This allows the package to be executed as:
    python -m docz [arguments]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
