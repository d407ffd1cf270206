# ========================================================================
# File:       odm/config/env.py
# Purpose:    Učitavanje .env fajla i pristup podešavanjima ODM-a
# Author:     Aleksandar Popovic
# Created:    2025-08-07
# Updated:    2025-08-18 (DEFAULTS tabela, ODM ključevi)
# ========================================================================

import os
from pathlib import Path
from dotenv import load_dotenv


# Podrazumevane vrednosti kada ključ nije ni u os.environ ni u .env
DEFAULTS = {
    "ODM_CONNECTION_SERVICE": "mongo",
    "LOG_FILE_PATH": "storage/logs/odm.log",
    "LOG_LEVEL": "info",
    "DEV_MODE": "false",
}


class EnvLoader:
    """
    Loader podešavanja:
    - pronađe .env u root-u projekta (ili pored ovog fajla),
    - učita ga samo jednom,
    - os.environ uvek ima prednost (testovi tako prave override).
    """
    _loaded = False
    _loaded_path: Path | None = None

    @staticmethod
    def _find_env_path() -> Path | None:
        here = Path(__file__).resolve()
        candidates = [
            here.parents[2] / ".env" if len(here.parents) >= 3 else None,  # <repo>/.env
            here.parents[1] / ".env" if len(here.parents) >= 2 else None,  # odm/.env
            here.parent / ".env",
        ]
        for p in candidates:
            if p and p.exists():
                return p
        return None

    @classmethod
    def load(cls, force: bool = False) -> None:
        if cls._loaded and not force:
            return
        env_path = cls._find_env_path()
        if env_path:
            load_dotenv(dotenv_path=env_path, override=False)
        cls._loaded_path = env_path
        cls._loaded = True

    @classmethod
    def get(cls, key: str, default=None):
        if not cls._loaded:
            cls.load()
        if default is None:
            default = DEFAULTS.get(key)
        return os.getenv(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        val = cls.get(key, None)
        if val is None:
            return default
        return str(val).strip().lower() in ("1", "true", "yes", "y", "on")

    @classmethod
    def debug_info(cls) -> dict:
        return {
            "loaded": cls._loaded,
            "env_path": str(cls._loaded_path) if cls._loaded_path else None,
        }
