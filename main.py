#!/usr/bin/env python3
"""PomoRing — entry point.

Run with:
    python main.py
    python -m pomoring
"""

from pomoring.__main__ import main


if __name__ == "__main__":
    main()
