#!/usr/bin/env python3
"""
chunkcodec - chunk addressing and pairing keys for voxel worlds.

Usage:
    python3 main.py split -33 70 12              # Split a world position
    python3 main.py split -33 70 12 -p cubic16   # ...with a preset layout
    python3 main.py encode -3 7                  # Pack a signed pair into a key
    python3 main.py decode 97                    # Unpack a key
    python3 main.py --help                       # Show help
"""

import sys
from pathlib import Path

# Add src to path so we can import without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from chunkcodec.cli import app


if __name__ == "__main__":
    app()
