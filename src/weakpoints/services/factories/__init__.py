"""Factory helpers for runtime entities."""

from .creature_factory import create_creature
from .id_factory import make_instance_id

__all__ = [
    "create_creature",
    "make_instance_id",
]
