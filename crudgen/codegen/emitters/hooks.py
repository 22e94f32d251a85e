"""
Data-fetching and mutation hooks emitter.

Read operations become query hooks keyed on the entity's list query key;
write operations become mutation hooks that invalidate that same key, so
a successful create/update/delete refreshes every cached read.
"""

from dataclasses import dataclass
from typing import List, Tuple

from ...logging_config import get_logger
from ..core.document import (
    Declaration,
    Document,
    ImportDecl,
    MutationHookDecl,
    Parameter,
    QueryHookDecl,
    TypeAliasDecl,
)
from ..core.generator import ArtifactEmitter
from ..core.naming import DerivedNames, Operation
from ..core.schema import Schema

logger = get_logger(__name__)

# Past-tense success flags returned by mutation hooks
SUCCESS_FLAGS = {"create": "isCreated", "update": "isUpdated", "delete": "isDeleted"}


@dataclass(frozen=True)
class _HookUnit:
    """A hook plus what its module must import or declare alongside it."""

    hook: Declaration
    query_imports: Tuple[str, ...]
    needs_request_type: bool = False
    support: Tuple[Declaration, ...] = ()


class HooksEmitter(ArtifactEmitter):
    """Emits react-query hooks for an entity."""

    @property
    def kind(self) -> str:
        return "hooks"

    def build_documents(self, schema: Schema, names: DerivedNames) -> List[Document]:
        logger.debug(
            "Building %s hooks for %s", self.config.hooks_layout, names.entity
        )
        units = [self._unit(op, names) for op in names.operations()]

        if self.config.hooks_layout == "per_operation":
            return [
                self._document(f"model/{self.file_name(unit.hook.name)}", [unit], names)
                for unit in units
            ]

        return [
            self._document(f"model/{self.file_name(names.hooks_module)}", units, names)
        ]

    def _document(
        self, path: str, units: List[_HookUnit], names: DerivedNames
    ) -> Document:
        query_imports = sorted({name for unit in units for name in unit.query_imports})

        imports = [
            ImportDecl(tuple(query_imports), self.config.query_package),
            ImportDecl((names.client_name,), f"../api/{names.client_module}"),
        ]
        if any(unit.needs_request_type for unit in units):
            imports.append(
                ImportDecl((names.request_type,), f"../types/{names.types_module}")
            )

        declarations = []
        for unit in units:
            declarations.extend(unit.support)
            declarations.append(unit.hook)

        return Document(
            path=path, imports=tuple(imports), declarations=tuple(declarations)
        )

    def _unit(self, op: Operation, names: DerivedNames) -> _HookUnit:
        if op.is_query:
            return self._query_unit(op, names)
        return self._mutation_unit(op, names)

    def _query_unit(self, op: Operation, names: DerivedNames) -> _HookUnit:
        id_param = Parameter("id", self.config.id_type) if op.with_id else None
        hook = QueryHookDecl(
            name=op.hook,
            client=names.client_name,
            operation=op.function,
            query_key=names.list_query_key,
            result_name=names.lower if op.with_id else names.plural,
            id_param=id_param,
        )
        return _HookUnit(hook=hook, query_imports=("useQuery",))

    def _mutation_unit(self, op: Operation, names: DerivedNames) -> _HookUnit:
        support: Tuple[Declaration, ...] = ()
        needs_request_type = True

        if op.kind == "create":
            variables = Parameter("request", names.request_type)
            call_args = ("request",)
        elif op.kind == "update":
            variables_type = f"Update{names.request_type}"
            support = (
                TypeAliasDecl(
                    variables_type,
                    f"{{ id: {self.config.id_type}; request: {names.request_type} }}",
                    exported=False,
                ),
            )
            variables = Parameter("{ id, request }", variables_type)
            call_args = ("id", "request")
        else:
            variables = Parameter("id", self.config.id_type)
            call_args = ("id",)
            needs_request_type = False

        hook = MutationHookDecl(
            name=op.hook,
            client=names.client_name,
            operation=op.function,
            mutation_key=names.mutation_key(op.kind),
            invalidates=names.list_query_key,
            variables=variables,
            call_args=call_args,
            mutate_name=f"on{op.hook[len('use'):]}",
            success_name=SUCCESS_FLAGS[op.kind],
            result_name=None if op.kind == "delete" else names.lower,
        )
        return _HookUnit(
            hook=hook,
            query_imports=("useMutation", "useQueryClient"),
            needs_request_type=needs_request_type,
            support=support,
        )
