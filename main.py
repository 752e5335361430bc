#!/usr/bin/env python3
"""
QuickCraps - Main Entry Point

Plays thousands of shooter turns at a simulated craps table and reports how
roll length turns into money won or lost for a betting strategy.
"""
import sys

from quick_craps.cli import main


if __name__ == "__main__":
    sys.exit(main())
