#!/usr/bin/env python3
"""Allow ``python -m bigramkit``."""

import sys

from bigramkit.cli import main

if __name__ == '__main__':
    sys.exit(main())
