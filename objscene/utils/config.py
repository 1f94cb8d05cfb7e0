"""
Простой загрузчик/сохранитель настроек парсера в формате JSON.
Если файл не найден – используются настройки по‑умолчанию.
"""

import copy
import json
from pathlib import Path
from objscene.utils.logger import logger

DEFAULT_CONFIG = {
    "log_level": "INFO",
    "min_face_corners": 3,
    "default_group_name": "Unnamed",
    "load_material_library": True,
}


class Config:
    """Настройки парсеров. Без пути – только значения по‑умолчанию."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else None
        self._load()

    def _load(self):
        if self.path is None:
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            return
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError(f"top level must be an object, got {type(data).__name__}")
                self.data = data
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
        else:
            logger.info(f"[Config] No config file at {self.path} – using defaults.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)

    def save(self, path: str | Path | None = None):
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("Config.save() needs a path")
        with target.open("w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=4)
        self.path = target
        logger.info(f"[Config] Configuration saved to {target}.")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)
