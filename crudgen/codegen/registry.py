"""
Emitter registry for managing the artifacts produced per entity.

Emitters are kept in registration order, which is also the order the
materializer writes their artifacts.
"""

from typing import Dict, List, Optional, Type

from ..logging_config import get_logger
from .core.config import GeneratorConfig
from .core.errors import GeneratorError
from .core.generator import ArtifactEmitter
from .core.templates import DocumentRenderer

logger = get_logger(__name__)


class RegistryError(GeneratorError):
    """Exception raised for registry-related errors."""

    pass


class EmitterRegistry:
    """Registry for managing available artifact emitters."""

    def __init__(self):
        """Initialize empty registry."""
        self._emitters: Dict[str, Type[ArtifactEmitter]] = {}

    def register(
        self,
        kind: str,
        emitter_class: Type[ArtifactEmitter],
        replace: bool = False,
    ):
        """
        Register an emitter for an artifact kind.

        Args:
            kind: Artifact kind (e.g., 'client', 'hooks')
            emitter_class: Class implementing ArtifactEmitter
            replace: If True, replace an existing registration in place

        Raises:
            RegistryError: If the class is invalid or the kind is taken
        """
        if not (
            isinstance(emitter_class, type) and issubclass(emitter_class, ArtifactEmitter)
        ):
            raise RegistryError("Emitter class must inherit from ArtifactEmitter")

        kind_key = kind.lower()

        if kind_key in self._emitters and not replace:
            raise RegistryError(f"Emitter already registered for '{kind}'")

        self._emitters[kind_key] = emitter_class
        logger.debug("Registered %s for %s", emitter_class.__name__, kind_key)

    def unregister(self, kind: str):
        """Unregister the emitter for a kind, if any."""
        self._emitters.pop(kind.lower(), None)

    def get_emitter_class(self, kind: str) -> Type[ArtifactEmitter]:
        """
        Get emitter class for an artifact kind.

        Raises:
            RegistryError: If kind not found
        """
        kind_key = kind.lower()
        if kind_key in self._emitters:
            return self._emitters[kind_key]

        raise RegistryError(
            f"No emitter registered for artifact kind: {kind}. "
            f"Available: {', '.join(self.list_kinds())}"
        )

    def create_emitters(
        self,
        config: Optional[GeneratorConfig] = None,
        renderer: Optional[DocumentRenderer] = None,
    ) -> List[ArtifactEmitter]:
        """
        Instantiate every registered emitter in registration order.

        Aggregating emitters (the barrel) receive the non-aggregating
        emitters as their sources.
        """
        config = config or GeneratorConfig()
        renderer = renderer or DocumentRenderer()

        emitters = []
        sources = []
        for kind, emitter_class in self._emitters.items():
            if emitter_class.aggregates:
                emitter = emitter_class(config, renderer, sources=list(sources))
            else:
                emitter = emitter_class(config, renderer)
                sources.append(emitter)
            emitters.append(emitter)

        return emitters

    def list_kinds(self) -> List[str]:
        """Get registered kinds in registration order."""
        return list(self._emitters.keys())

    def is_registered(self, kind: str) -> bool:
        return kind.lower() in self._emitters


def create_default_registry() -> EmitterRegistry:
    """Build a registry with the client, types, hooks and barrel emitters."""
    from .emitters import BarrelEmitter, ClientEmitter, HooksEmitter, TypesEmitter

    registry = EmitterRegistry()
    registry.register("client", ClientEmitter)
    registry.register("types", TypesEmitter)
    registry.register("hooks", HooksEmitter)
    registry.register("index", BarrelEmitter)
    return registry


# Global registry instance - created once
_global_registry: Optional[EmitterRegistry] = None


def get_registry() -> EmitterRegistry:
    """Get the global emitter registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = create_default_registry()
    return _global_registry
