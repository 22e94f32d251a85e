"""
crudgen code generation module.

Generates a TypeScript client, type declarations, react-query hooks and a
barrel for an entity described by a field schema.
"""

from pathlib import Path
from typing import Any, List, Optional, Union

from .core.config import ConfigError, GeneratorConfig, load_config
from .core.errors import (
    EntityNameError,
    FilesystemError,
    GeneratorError,
    MalformedSchemaError,
    MissingInputError,
)
from .core.generator import GeneratedArtifact, GenerationResult
from .core.naming import DerivedNames, derive_names
from .core.schema import Field, Schema, build_schema
from .manifest import ensure_exported
from .materializer import Materializer
from .registry import EmitterRegistry, RegistryError, get_registry


def generate_entity(
    entity_name: str,
    raw_schema: Any,
    output_dir: Optional[Union[str, Path]] = None,
    config: Optional[GeneratorConfig] = None,
) -> List[Path]:
    """
    Generate and write every artifact for one entity.

    Args:
        entity_name: Capitalized entity name, e.g. ``"User"``
        raw_schema: Mapping of key to ``{"name": ..., "type": ...}``
        output_dir: Target root (defaults to the configured output_dir)
        config: Generator configuration

    Returns:
        Paths of the written artifacts
    """
    return Materializer(config).run(entity_name, raw_schema, output_dir)


def preview_entity(
    entity_name: str, raw_schema: Any, config: Optional[GeneratorConfig] = None
) -> GenerationResult:
    """Render every artifact for one entity without writing anything."""
    return Materializer(config).plan(entity_name, raw_schema)


__all__ = [
    "ConfigError",
    "DerivedNames",
    "EmitterRegistry",
    "EntityNameError",
    "Field",
    "FilesystemError",
    "GeneratedArtifact",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "MalformedSchemaError",
    "Materializer",
    "MissingInputError",
    "RegistryError",
    "Schema",
    "build_schema",
    "derive_names",
    "ensure_exported",
    "generate_entity",
    "get_registry",
    "load_config",
    "preview_entity",
]
