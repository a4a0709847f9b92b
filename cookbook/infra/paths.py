from pathlib import Path

# Centralized paths for the bundled demo data (read-only)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
STORAGE_FILE = DATA_DIR / 'storage.json'
COOKBOOK_FILE = DATA_DIR / 'cookbook.json'

__all__ = ['DATA_DIR', 'STORAGE_FILE', 'COOKBOOK_FILE']
