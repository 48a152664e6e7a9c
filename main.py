#!/usr/bin/env python3
"""
Store Inventory - Entry point.

Run this to start the console menu.
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from store_inventory.cli import main

if __name__ == "__main__":
    sys.exit(main())
