"""
Artifact emitters.

One emitter per generated artifact kind: REST client, type declarations,
query/mutation hooks, and the per-entity barrel.
"""

from .barrel import BarrelEmitter
from .client import ClientEmitter
from .hooks import HooksEmitter
from .types import TypesEmitter

__all__ = [
    "ClientEmitter",
    "TypesEmitter",
    "HooksEmitter",
    "BarrelEmitter",
]
