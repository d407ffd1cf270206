# ========================================================================
# File:       odm/helpers/core_helper.py
# Purpose:    Bezbedni pozivi + ključevi klasa i provere instanci
# Author:     Aleksandar Popovic
# Created:    2025-08-07
# Updated:    2025-08-18
# ========================================================================

from __future__ import annotations
from typing import Any, Callable


def safe_call(func: Callable, *args, **kwargs):
    """Poziva funkciju i prepušta izuzetke višem sloju."""
    return func(*args, **kwargs)


def class_key(target: Any) -> str:
    """
    Stabilan identifikator tipa modela (uvek lowercase): puno ime
    "modul.KlasaModela", pa se istoimene klase iz različitih modula ne mešaju.
    Prihvata ime klase, klasu ili instancu. Klasa može da deklariše sopstveni
    __collection_key__; on se ne nasleđuje.
    """
    if isinstance(target, str):
        return target.lower()
    cls = target if isinstance(target, type) else type(target)
    explicit = cls.__dict__.get("__collection_key__")
    return (explicit or f"{cls.__module__}.{cls.__qualname__}").lower()


def short_key(key: str) -> str:
    """Poslednji segment ključa: 'shop.models.user' -> 'user'."""
    return key.rsplit(".", 1)[-1]


def is_model_instance(target: Any) -> bool:
    """True samo za objekat-instancu; None, stringovi i klase nisu modeli."""
    return target is not None and not isinstance(target, (str, bytes, type))


def has_hook(target: Any, name: str) -> bool:
    return callable(getattr(target, name, None))
