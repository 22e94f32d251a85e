"""
Data-access client emitter.

Generates ``api/{entity}Request`` with one async request function per CRUD
operation and an exported client object bundling them.
"""

from typing import List

from ..core.document import (
    ClientObjectDecl,
    Document,
    ImportDecl,
    Parameter,
    RequestDecl,
)
from ..core.generator import ArtifactEmitter
from ..core.naming import DerivedNames, Operation
from ..core.schema import Schema

ID_PARAM = "id"


class ClientEmitter(ArtifactEmitter):
    """Emits the REST client for an entity."""

    @property
    def kind(self) -> str:
        return "client"

    def document_path(self, names: DerivedNames) -> str:
        return f"api/{self.file_name(names.client_module)}"

    def build_documents(self, schema: Schema, names: DerivedNames) -> List[Document]:
        imports = (
            ImportDecl(
                (self.config.base_url_symbol, self.config.http_client_symbol),
                self.config.http_module,
            ),
            ImportDecl(
                (names.client_type, names.request_type, names.response_type),
                f"../types/{names.types_module}",
            ),
        )

        requests = tuple(self._request(op, names) for op in names.operations())
        client = ClientObjectDecl(
            name=names.client_name,
            type_name=names.client_type,
            members=tuple(request.name for request in requests),
        )

        return [
            Document(
                path=self.document_path(names),
                imports=imports,
                declarations=requests + (client,),
            )
        ]

    def _request(self, op: Operation, names: DerivedNames) -> RequestDecl:
        """Map one operation onto the fixed REST convention."""
        id_param = Parameter(ID_PARAM, self.config.id_type)
        parameters = []
        body_param = None

        if op.with_id:
            parameters.append(id_param)

        if op.kind == "create":
            body_param = "request"
        elif op.kind == "update":
            body_param = "body"

        if body_param:
            parameters.append(Parameter(body_param, names.request_type))

        if op.kind == "list":
            response_type = f"{names.response_type}[]"
        elif op.kind == "delete":
            response_type = "void"
        else:
            response_type = names.response_type

        return RequestDecl(
            name=op.function,
            method=op.method,
            collection=names.collection,
            response_type=response_type,
            parameters=tuple(parameters),
            id_param=ID_PARAM if op.with_id else None,
            body_param=body_param,
            base_url_symbol=self.config.base_url_symbol,
            http_client_symbol=self.config.http_client_symbol,
        )
