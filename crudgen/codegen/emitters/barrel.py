"""
Per-entity barrel emitter.

The re-export list is read off the documents the sibling emitters build,
so the barrel names exactly the symbols those modules export.
"""

from typing import List, Optional, Sequence

from ..core.document import Document, ReExportDecl
from ..core.generator import ArtifactEmitter
from ..core.naming import DerivedNames
from ..core.schema import Schema
from .client import ClientEmitter
from .hooks import HooksEmitter
from .types import TypesEmitter


class BarrelEmitter(ArtifactEmitter):
    """Emits ``index`` re-exporting the entity's client, types and hooks."""

    aggregates = True

    def __init__(
        self,
        config=None,
        renderer=None,
        sources: Optional[Sequence[ArtifactEmitter]] = None,
    ):
        super().__init__(config, renderer)
        if sources is None:
            sources = [
                ClientEmitter(self.config, renderer),
                TypesEmitter(self.config, renderer),
                HooksEmitter(self.config, renderer),
            ]
        self.sources = list(sources)

    @property
    def kind(self) -> str:
        return "index"

    def build_documents(self, schema: Schema, names: DerivedNames) -> List[Document]:
        declarations = []

        for source in self.sources:
            for document in source.build_documents(schema, names):
                values = document.value_exports()
                types = document.type_exports()

                if values:
                    declarations.append(
                        ReExportDecl(values, document.module_specifier)
                    )
                if types:
                    declarations.append(
                        ReExportDecl(types, document.module_specifier, type_only=True)
                    )

        return [
            Document(
                path=self.file_name("index"),
                declarations=tuple(declarations),
                separator="\n",
            )
        ]
