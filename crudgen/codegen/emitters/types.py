"""
Type declaration emitter.

Generates ``types/{entity}Types`` holding the entity interface, its
request/response aliases and the client-shape interface.
"""

from typing import List

from ..core.document import Document, InterfaceDecl, Property, TypeAliasDecl
from ..core.generator import ArtifactEmitter
from ..core.naming import DerivedNames
from ..core.schema import Schema


class TypesEmitter(ArtifactEmitter):
    """Emits TypeScript declarations for an entity."""

    @property
    def kind(self) -> str:
        return "types"

    def document_path(self, names: DerivedNames) -> str:
        return f"types/{self.file_name(names.types_module)}"

    def build_documents(self, schema: Schema, names: DerivedNames) -> List[Document]:
        entity = InterfaceDecl(
            name=names.type_name,
            properties=tuple(Property(f.name, f.type) for f in schema.fields),
        )

        # Request and response bodies both carry the full entity shape
        aliases = (
            TypeAliasDecl(names.request_type, names.type_name),
            TypeAliasDecl(names.response_type, names.type_name),
        )

        return [
            Document(
                path=self.document_path(names),
                declarations=(entity,) + aliases + (self._client_shape(names),),
            )
        ]

    def _client_shape(self, names: DerivedNames) -> InterfaceDecl:
        id_type = self.config.id_type
        response = names.response_type
        request = names.request_type

        signatures = (
            Property(names.list_fn, f"() => Promise<{response}[]>"),
            Property(names.get_fn, f"(id: {id_type}) => Promise<{response}>"),
            Property(names.create_fn, f"(request: {request}) => Promise<{response}>"),
            Property(
                names.update_fn,
                f"(id: {id_type}, request: {request}) => Promise<{response}>",
            ),
            Property(names.delete_fn, f"(id: {id_type}) => Promise<void>"),
        )
        return InterfaceDecl(name=names.client_type, properties=signatures)
