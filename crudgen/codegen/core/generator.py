"""
Base emitter interface for all generated artifacts.

Defines the contract every artifact emitter implements: build typed
documents from a schema and derived names, then render them to text.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .config import GeneratorConfig
from .document import Document
from .naming import DerivedNames
from .schema import Schema
from .templates import DocumentRenderer


@dataclass(frozen=True)
class GeneratedArtifact:
    """Rendered file content and its path relative to the target root."""

    relative_path: str
    content: str


class ArtifactEmitter(ABC):
    """Abstract base class for all artifact emitters."""

    # Emitters that re-export other emitters' symbols receive them as sources
    aggregates = False

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        renderer: Optional[DocumentRenderer] = None,
    ):
        """Initialize emitter with optional configuration."""
        self.config = config or GeneratorConfig()
        self._renderer = renderer

    @property
    @abstractmethod
    def kind(self) -> str:
        """Return the artifact kind (e.g., 'client', 'types')."""
        pass

    @property
    def renderer(self) -> DocumentRenderer:
        if self._renderer is None:
            self._renderer = DocumentRenderer()
        return self._renderer

    @abstractmethod
    def build_documents(self, schema: Schema, names: DerivedNames) -> List[Document]:
        """
        Build the typed documents for one entity.

        Args:
            schema: Validated entity schema
            names: Names derived once for this run

        Returns:
            Documents with paths relative to the entity directory
        """
        pass

    def emit(self, schema: Schema, names: DerivedNames) -> List[GeneratedArtifact]:
        """Render every document into an artifact rooted at the entity directory."""
        return [
            GeneratedArtifact(
                relative_path=f"{names.directory}/{document.path}",
                content=self.renderer.render(document),
            )
            for document in self.build_documents(schema, names)
        ]

    def file_name(self, stem: str) -> str:
        return self.config.file_name(stem)


@dataclass
class GenerationResult:
    """Container for one planned run: artifacts plus metadata."""

    entity_name: str
    names: DerivedNames
    schema: Schema
    artifacts: List[GeneratedArtifact]
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def paths(self) -> List[str]:
        return [artifact.relative_path for artifact in self.artifacts]
