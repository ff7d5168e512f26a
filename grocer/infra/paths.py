from pathlib import Path

from grocer.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = Path(_CONFIGURED_DATA_DIR).resolve()
TEMPLATES_DIR = (Path(__file__).parent.parent / 'templates').resolve()

__all__ = ['DATA_DIR', 'TEMPLATES_DIR']
