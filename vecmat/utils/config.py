"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Без явного пути конфигурация живёт только в памяти (DEFAULT_CONFIG):
ни переменных окружения, ни файлов в рабочей директории. Файл читается,
только если путь передан явно: Config("vecmat.json") или Config.load(...).
"""

import json
from pathlib import Path
from vecmat.utils.logger import logger

DEFAULT_CONFIG = {
    "epsilon": 1e-6,          # допуск для isclose()
    "log_level": "WARNING",
}


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path) if path is not None else None
            cls._instance._load()
        return cls._instance

    @classmethod
    def load(cls, path: str) -> "Config":
        """Заменить текущую конфигурацию файлом `path`."""
        cls.reset()
        return cls(path)

    @classmethod
    def reset(cls) -> None:
        """Забыть текущий экземпляр (следующий Config() – снова умолчания)."""
        cls._instance = None

    def _load(self):
        self.data = DEFAULT_CONFIG.copy()
        if self.path is None:
            return
        if not self.path.is_file():
            logger.warning(f"[Config] No config file at {self.path} – using defaults.")
            return
        try:
            with self.path.open("r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error(f"[Config] Failed to read config: {exc}")
            return
        if not isinstance(loaded, dict):
            logger.error(f"[Config] {self.path}: top level must be an object")
            return
        self.data.update(loaded)
        logger.info("[Config] Loaded configuration.")

    def save(self):
        if self.path is None:
            logger.debug("[Config] In-memory configuration – nothing to save.")
            return
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)
