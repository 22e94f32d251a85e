"""
Core code generation components.

Provides the schema model, naming rules, document model, renderer and the
base emitter interface used by every artifact emitter.
"""

from .config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .document import Document
from .errors import (
    EntityNameError,
    FilesystemError,
    GeneratorError,
    MalformedSchemaError,
    MissingInputError,
)
from .generator import ArtifactEmitter, GeneratedArtifact, GenerationResult
from .naming import DerivedNames, Operation, derive_names
from .schema import Field, Schema, build_schema, validate_schema
from .templates import DocumentRenderer, TemplateEngine, TemplateError

__all__ = [
    # Errors
    "GeneratorError",
    "MissingInputError",
    "MalformedSchemaError",
    "EntityNameError",
    "FilesystemError",
    # Schema system - core data structures
    "Field",
    "Schema",
    "build_schema",
    "validate_schema",
    # Naming
    "DerivedNames",
    "Operation",
    "derive_names",
    # Emitter interface
    "ArtifactEmitter",
    "GeneratedArtifact",
    "GenerationResult",
    "Document",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "DocumentRenderer",
]
