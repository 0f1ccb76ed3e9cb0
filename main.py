#!/usr/bin/env python3
"""Main script for rocket generation."""
import sys

from rocketgen.cli import main


if __name__ == '__main__':
    sys.exit(main())
