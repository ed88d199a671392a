"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию
(файл появляется только после явного save()).

Конфигурация касается только логирования: арифметика и конструкторы
Vector её не читают.
"""

import json
import logging
from pathlib import Path
from gmath.utils.logger import logger

DEFAULT_CONFIG = {
    "log_level": "INFO",
}

def _valid_level(level) -> bool:
    return isinstance(level, str) and isinstance(
        logging.getLevelName(level.upper()), int
    )

class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "gmath.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Забыть загруженный экземпляр (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    data = json.load(f)
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                data = {}
            self.data = self._validated(data)
        else:
            logger.debug("[Config] No config file – using defaults.")
            self.data = DEFAULT_CONFIG.copy()

    @staticmethod
    def _validated(data) -> dict:
        if not isinstance(data, dict):
            logger.error(f"[Config] Expected a JSON object, got {type(data).__name__}")
            return DEFAULT_CONFIG.copy()
        result = DEFAULT_CONFIG.copy()
        result.update(data)
        if not _valid_level(result["log_level"]):
            logger.error(f"[Config] Unknown log_level {result['log_level']!r}")
            result["log_level"] = DEFAULT_CONFIG["log_level"]
        return result

    def apply_logging(self):
        """Выставить уровень логгера пакета из конфигурации."""
        logger.setLevel(self["log_level"].upper())

    def save(self):
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=4)
        logger.info("[Config] Configuration saved.")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        if key == "log_level" and not _valid_level(value):
            raise ValueError(f"Unknown log level: {value!r}")
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)
