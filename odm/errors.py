# =============================================================================
# File:        odm/errors.py
# Purpose:     Hijerarhija izuzetaka ODM sloja
# Author:      Aleksandar Popović
# Created:     2025-08-18
# =============================================================================

from __future__ import annotations


class OdmError(Exception):
    """Bazna greška ODM sloja."""
    pass


class CollectionError(OdmError):
    """Greška collection menadžera ili modela (npr. nema DI kontejnera)."""
    pass


class InvalidArgumentError(CollectionError, ValueError):
    """Prosleđen argument nije validan (npr. ime klase umesto instance modela)."""
    pass


class ContainerError(OdmError, LookupError):
    """Servis nije registrovan u DI kontejneru."""
    pass


class EventsError(OdmError, ValueError):
    """Neispravan tip događaja."""
    pass
