#!/usr/bin/env python3
"""
Convenience wrapper to run the server
Use this or run directly: python -m business_planner.server
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

if __name__ == "__main__":
    from business_planner.server import main
    main()
