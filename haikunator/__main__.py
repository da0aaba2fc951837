#!/usr/bin/env python3
"""Allow ``python -m haikunator``."""

import sys

from haikunator.cli import main

if __name__ == '__main__':
    sys.exit(main())
