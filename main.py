#!/usr/bin/env python3
"""
My Location BASE — entry point.
"""

import sys
from pathlib import Path

# Allow running from repo root without installing package
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from my_location_base.app import run_app


def main() -> None:
    run_app()


if __name__ == "__main__":
    main()
