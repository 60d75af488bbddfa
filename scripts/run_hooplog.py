#!/usr/bin/env python3
"""
Run the HoopLog shell straight from a source checkout, without installing.
"""
import sys
from pathlib import Path

# Add backend source to path
backend_path = Path(__file__).parent.parent / "backend" / "src"
sys.path.insert(0, str(backend_path))

from hooplog.adapters.console import main


if __name__ == "__main__":
    sys.exit(main())
