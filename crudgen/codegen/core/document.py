"""
Typed document model for generated TypeScript modules.

Emitters build a Document out of declarations; the renderer in
``templates.py`` turns each declaration into text through its own Jinja2
template. Keeping the two apart lets naming and ordering be tested without
looking at formatted source.
"""

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import ClassVar, List, Optional, Tuple

MAX_LINE_LENGTH = 80


def _fits_on_one_line(keyword: str, names: Tuple[str, ...], module: str) -> bool:
    return len(f"{keyword} {{ {', '.join(names)} }} from '{module}';") <= MAX_LINE_LENGTH


@dataclass(frozen=True)
class ImportDecl:
    """``import { a, b } from 'module';``"""

    names: Tuple[str, ...]
    module: str

    template: ClassVar[str] = "import.ts.j2"

    @property
    def inline(self) -> bool:
        return _fits_on_one_line("import", self.names, self.module)


class Declaration:
    """Base for top-level declarations that may be exported."""

    template: ClassVar[str] = ""
    is_type: ClassVar[bool] = False

    name: str
    exported: bool


@dataclass(frozen=True)
class Property:
    name: str
    type: str


@dataclass(frozen=True)
class InterfaceDecl(Declaration):
    name: str
    properties: Tuple[Property, ...] = ()
    exported: bool = True

    template: ClassVar[str] = "interface.ts.j2"
    is_type: ClassVar[bool] = True


@dataclass(frozen=True)
class TypeAliasDecl(Declaration):
    name: str
    target: str
    exported: bool = True

    template: ClassVar[str] = "type_alias.ts.j2"
    is_type: ClassVar[bool] = True


@dataclass(frozen=True)
class Parameter:
    name: str
    type: str

    def __str__(self) -> str:
        return f"{self.name}: {self.type}"


@dataclass(frozen=True)
class RequestDecl(Declaration):
    """An async client function issuing one HTTP request."""

    name: str
    method: str
    collection: str
    response_type: str
    parameters: Tuple[Parameter, ...] = ()
    id_param: Optional[str] = None
    body_param: Optional[str] = None
    base_url_symbol: str = "BASE_URL"
    http_client_symbol: str = "httpClient"
    exported: bool = False

    template: ClassVar[str] = "request.ts.j2"

    @property
    def url_path(self) -> str:
        """Path below the base URL, e.g. ``users/`` or ``users/${id}``."""
        if self.id_param:
            return f"{self.collection}/${{{self.id_param}}}"
        return f"{self.collection}/"

    @property
    def url(self) -> str:
        """Template literal for the request URL."""
        return f"`${{{self.base_url_symbol}}}/{self.url_path}`"


@dataclass(frozen=True)
class ClientObjectDecl(Declaration):
    """Exported object bundling the request functions."""

    name: str
    type_name: str
    members: Tuple[str, ...]
    exported: bool = True

    template: ClassVar[str] = "client_object.ts.j2"


@dataclass(frozen=True)
class QueryHookDecl(Declaration):
    name: str
    client: str
    operation: str
    query_key: str
    result_name: str
    id_param: Optional[Parameter] = None
    exported: bool = True

    template: ClassVar[str] = "query_hook.ts.j2"

    @property
    def key_parts(self) -> Tuple[str, ...]:
        if self.id_param:
            return ("queryKey", self.id_param.name)
        return ("queryKey",)


@dataclass(frozen=True)
class MutationHookDecl(Declaration):
    """A mutation hook that invalidates a query key on success."""

    name: str
    client: str
    operation: str
    mutation_key: str
    invalidates: str
    variables: Parameter
    call_args: Tuple[str, ...]
    mutate_name: str
    success_name: str
    result_name: Optional[str] = None
    exported: bool = True

    template: ClassVar[str] = "mutation_hook.ts.j2"

    @property
    def returned(self) -> Tuple[str, ...]:
        names = (self.success_name, self.mutate_name)
        if self.result_name:
            return (self.result_name,) + names
        return names


@dataclass(frozen=True)
class ReExportDecl(Declaration):
    """``export { a, b } from './module';``"""

    names: Tuple[str, ...]
    module: str
    type_only: bool = False
    name: str = ""
    exported: bool = False

    template: ClassVar[str] = "reexport.ts.j2"

    @property
    def inline(self) -> bool:
        keyword = "export type" if self.type_only else "export"
        return _fits_on_one_line(keyword, self.names, self.module)


@dataclass(frozen=True)
class Document:
    """One generated module: its path, imports and declarations."""

    path: str  # Relative to the entity directory, e.g. "api/userRequest.ts"
    imports: Tuple[ImportDecl, ...] = ()
    declarations: Tuple[Declaration, ...] = ()
    separator: str = "\n\n"

    @property
    def module_specifier(self) -> str:
        """Relative import specifier from the entity directory, e.g. ``./api/userRequest``."""
        return f"./{PurePosixPath(self.path).with_suffix('')}"

    def exported_symbols(self) -> List[Tuple[str, bool]]:
        """Return ``(name, is_type)`` for every exported declaration, in order."""
        return [
            (decl.name, decl.is_type)
            for decl in self.declarations
            if decl.exported and decl.name
        ]

    def value_exports(self) -> Tuple[str, ...]:
        return tuple(name for name, is_type in self.exported_symbols() if not is_type)

    def type_exports(self) -> Tuple[str, ...]:
        return tuple(name for name, is_type in self.exported_symbols() if is_type)
