#!/usr/bin/env python3
"""
Tool Inventory — entry point.
"""

import sys
from pathlib import Path

# Allow running from repo root without installing package
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from tool_inventory.ui.main_window import run


def main() -> None:
    sys.exit(run(sys.argv))


if __name__ == "__main__":
    main()
