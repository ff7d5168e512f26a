"""Key/value persistence: one JSON document per key inside the data directory."""
import json
import logging
import os
import re
import shutil
import tempfile
from pathlib import Path
from typing import Any

from grocer.infra.paths import DATA_DIR

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r'^[A-Za-z0-9_\-]+$')


class JsonKeyValueStore:
    """get(key, default) / set(key, value) backed by ``<data_dir>/<key>.json``."""

    def __init__(self, data_dir: Path | str = DATA_DIR):
        self.data_dir = Path(data_dir)

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key or ''):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.data_dir / f"{key}.json"

    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value, or ``default`` when missing or unparsable."""
        path = self._path_for(key)
        if not path.exists():
            return default
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            logger.warning("Invalid JSON under key %s (%s); using default", key, e)
            return default
        except OSError as e:
            logger.warning("Could not read key %s from %s: %s", key, path, e)
            return default

    def set(self, key: str, value: Any) -> None:
        path = self._path_for(key)
        os.makedirs(self.data_dir, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(value, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
        logger.debug("Persisted key %s", key)
