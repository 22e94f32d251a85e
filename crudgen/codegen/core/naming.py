"""
Naming derivation for generated artifacts.

Turns an entity name into every identifier, URL segment and module name
the emitters need. All derived names are computed once per run so every
artifact agrees on naming.
"""

from dataclasses import dataclass
from typing import Tuple

from ...logging_config import get_logger
from .errors import EntityNameError

logger = get_logger(__name__)

PLURAL_SUFFIX = "s"


@dataclass(frozen=True)
class Operation:
    """One CRUD operation with its client function and hook names."""

    kind: str  # list, get, create, update, delete
    function: str
    hook: str
    method: str
    with_id: bool

    @property
    def is_query(self) -> bool:
        return self.method == "GET"


@dataclass(frozen=True)
class DerivedNames:
    """Identifiers, URL segments and module names derived from one entity."""

    entity: str
    lower: str
    plural: str
    plural_symbol: str

    # Type declarations
    type_name: str
    request_type: str
    response_type: str
    client_type: str

    # Client object and operation functions
    client_name: str
    list_fn: str
    get_fn: str
    create_fn: str
    update_fn: str
    delete_fn: str

    # Hooks
    list_hook: str
    get_hook: str
    create_hook: str
    update_hook: str
    delete_hook: str

    # Module stems (without extension)
    client_module: str
    types_module: str
    hooks_module: str

    directory: str
    export_line: str

    @property
    def collection(self) -> str:
        """URL collection segment used by the client."""
        return self.plural

    @property
    def list_query_key(self) -> str:
        """Cache key shared by the read hooks and invalidated by mutations."""
        return self.plural

    def mutation_key(self, kind: str) -> str:
        return f"{self.lower}-{kind}"

    def operations(self) -> Tuple[Operation, ...]:
        """Return the five CRUD operations in list/get/create/update/delete order."""
        return (
            Operation("list", self.list_fn, self.list_hook, "GET", False),
            Operation("get", self.get_fn, self.get_hook, "GET", True),
            Operation("create", self.create_fn, self.create_hook, "POST", False),
            Operation("update", self.update_fn, self.update_hook, "PATCH", True),
            Operation("delete", self.delete_fn, self.delete_hook, "DELETE", True),
        )


def pluralize(word: str) -> str:
    """Fixed-suffix pluralization; irregular nouns are not special-cased."""
    return f"{word}{PLURAL_SUFFIX}"


def derive_names(entity_name: str) -> DerivedNames:
    """
    Derive every generated name from an entity name.

    The entity name is used verbatim for symbols (pass ``"User"``, not
    ``"user"``); only its lower-cased form feeds URLs and file names.

    Args:
        entity_name: Capitalized entity identifier

    Returns:
        Immutable DerivedNames

    Raises:
        EntityNameError: If the name is empty
    """
    if not isinstance(entity_name, str) or not entity_name.strip():
        raise EntityNameError("Entity name must be a non-empty string")

    entity = entity_name
    lower = entity.lower()
    plural_symbol = pluralize(entity)

    names = DerivedNames(
        entity=entity,
        lower=lower,
        plural=pluralize(lower),
        plural_symbol=plural_symbol,
        type_name=f"{entity}Type",
        request_type=f"{entity}RequestType",
        response_type=f"{entity}ResponseType",
        client_type=f"{entity}ApiClientType",
        client_name=f"{lower}ApiClient",
        list_fn=f"get{plural_symbol}",
        get_fn=f"get{entity}ById",
        create_fn=f"create{entity}",
        update_fn=f"update{entity}",
        delete_fn=f"delete{entity}",
        list_hook=f"useGet{plural_symbol}",
        get_hook=f"useGet{entity}ById",
        create_hook=f"useCreate{entity}",
        update_hook=f"useUpdate{entity}",
        delete_hook=f"useDelete{entity}",
        client_module=f"{lower}Request",
        types_module=f"{lower}Types",
        hooks_module="requestHooks",
        directory=entity,
        export_line=f"export * from './{entity}';",
    )

    logger.debug("Derived names for %s: collection=%s", entity, names.collection)
    return names
