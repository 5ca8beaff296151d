#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine

Usage:
    python run.py play [--width W] [--height H]
    python run.py benchmark [--iterations N]
"""

import sys

from connect4_engine.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
