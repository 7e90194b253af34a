#!/usr/bin/env python3
"""LegendTimer — entry point.

Run with:
    python main.py
    python -m legendtimer
"""

from legendtimer.__main__ import main


if __name__ == "__main__":
    main()
