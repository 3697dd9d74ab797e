#!/usr/bin/env python3
"""LifeRPG — entry point.

Run with:
    python main.py status
    python -m liferpg log Workout 30
"""

import sys

from liferpg.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
