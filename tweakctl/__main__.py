#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
tweakctl main module entry point.
Enables running tweakctl as a module: python -m tweakctl
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
