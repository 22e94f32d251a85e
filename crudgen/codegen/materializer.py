"""
Materialization of generated artifacts.

Plans a run in memory (schema, names, rendered artifacts) and only then
touches the filesystem, so a malformed schema never leaves partial output.
"""

from pathlib import Path
from typing import Any, List, Optional, Union

from ..logging_config import get_logger
from .core.config import GeneratorConfig
from .core.errors import FilesystemError
from .core.generator import GeneratedArtifact, GenerationResult
from .core.naming import derive_names
from .core.schema import build_schema, validate_schema
from .manifest import ensure_exported
from .registry import EmitterRegistry, get_registry

logger = get_logger(__name__)


class Materializer:
    """Runs every emitter for one entity and writes the results."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        registry: Optional[EmitterRegistry] = None,
    ):
        self.config = config or GeneratorConfig()
        self.registry = registry or get_registry()

    def plan(self, entity_name: str, raw_schema: Any) -> GenerationResult:
        """
        Validate input and render every artifact without writing anything.

        Args:
            entity_name: Capitalized entity name, e.g. ``"User"``
            raw_schema: Mapping of key to ``{"name", "type"}`` or a Schema

        Returns:
            GenerationResult with artifacts in emission order

        Raises:
            MalformedSchemaError: If the schema is malformed
            EntityNameError: If the entity name is empty
        """
        schema = build_schema(raw_schema)
        names = derive_names(entity_name)
        warnings = validate_schema(schema, names.entity)

        artifacts: List[GeneratedArtifact] = []
        for emitter in self.registry.create_emitters(self.config):
            emitted = emitter.emit(schema, names)
            logger.debug("%s emitter produced %d artifact(s)", emitter.kind, len(emitted))
            artifacts.extend(emitted)

        metadata = {
            "entity": names.entity,
            "collection": names.collection,
            "field_count": len(schema),
            "artifact_count": len(artifacts),
            "hooks_layout": self.config.hooks_layout,
            "extension": self.config.extension,
        }

        return GenerationResult(
            entity_name=names.entity,
            names=names,
            schema=schema,
            artifacts=artifacts,
            warnings=warnings,
            metadata=metadata,
        )

    def run(
        self,
        entity_name: str,
        raw_schema: Any,
        output_dir: Optional[Union[str, Path]] = None,
    ) -> List[Path]:
        """
        Generate, write and register one entity.

        Existing files are overwritten. The manifest is updated once, after
        every artifact has been written.

        Returns:
            Paths of the written artifacts, in emission order

        Raises:
            FilesystemError: On any directory creation or write failure
        """
        result = self.plan(entity_name, raw_schema)
        for warning in result.warnings:
            logger.warning(warning)

        return self.write(result, output_dir)

    def write(
        self,
        result: GenerationResult,
        output_dir: Optional[Union[str, Path]] = None,
    ) -> List[Path]:
        """Write a planned result and register it in the manifest."""
        root = Path(output_dir if output_dir is not None else self.config.output_dir)

        written = [self._write(root, artifact) for artifact in result.artifacts]

        manifest_path = root / self.config.manifest_file
        ensure_exported(manifest_path, result.names.export_line)

        logger.info(
            "Generated %d file(s) for %s under %s", len(written), result.entity_name, root
        )
        return written

    def _write(self, root: Path, artifact: GeneratedArtifact) -> Path:
        target = root / artifact.relative_path
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(artifact.content, encoding="utf-8")
        except OSError as e:
            raise FilesystemError(target, e.strerror or str(e)) from e

        logger.debug("Wrote %s", target)
        return target
