"""
Paths for the bundled eatery corpus.

- DATA_DIR     — repository data directory
- EATERIES_DIR — one JSON document per eatery; the default catalog source
"""

from pathlib import Path

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
EATERIES_DIR: Path = DATA_DIR / "eateries"
