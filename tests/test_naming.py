"""Unit tests for name derivation (crudgen.codegen.core.naming).

Tests cover:
- Symbols, module stems and directory derived from an entity name
- The fixed plural suffix
- Operation order, HTTP methods and id usage
- Rejection of empty names
"""

from __future__ import annotations

import pytest

from crudgen.codegen import EntityNameError, derive_names
from crudgen.codegen.core.naming import pluralize


# ---------------------------------------------------------------------------
# derive_names
# ---------------------------------------------------------------------------


class TestDeriveNames:
    def test_type_symbols(self, user_names):
        assert user_names.type_name == "UserType"
        assert user_names.request_type == "UserRequestType"
        assert user_names.response_type == "UserResponseType"
        assert user_names.client_type == "UserApiClientType"

    def test_client_and_functions(self, user_names):
        assert user_names.client_name == "userApiClient"
        assert user_names.list_fn == "getUsers"
        assert user_names.get_fn == "getUserById"
        assert user_names.create_fn == "createUser"
        assert user_names.update_fn == "updateUser"
        assert user_names.delete_fn == "deleteUser"

    def test_hooks(self, user_names):
        assert user_names.list_hook == "useGetUsers"
        assert user_names.get_hook == "useGetUserById"
        assert user_names.create_hook == "useCreateUser"
        assert user_names.update_hook == "useUpdateUser"
        assert user_names.delete_hook == "useDeleteUser"

    def test_modules_and_directory(self, user_names):
        assert user_names.client_module == "userRequest"
        assert user_names.types_module == "userTypes"
        assert user_names.hooks_module == "requestHooks"
        assert user_names.directory == "User"
        assert user_names.export_line == "export * from './User';"

    def test_collection_and_query_key_agree(self, user_names):
        assert user_names.collection == "users"
        assert user_names.list_query_key == user_names.collection

    def test_multi_word_entity_lowercases_whole_name(self):
        names = derive_names("OrderItem")
        assert names.lower == "orderitem"
        assert names.collection == "orderitems"
        assert names.client_name == "orderitemApiClient"
        assert names.list_fn == "getOrderItems"

    def test_name_used_verbatim_for_symbols(self):
        names = derive_names("user")
        assert names.type_name == "userType"
        assert names.directory == "user"

    @pytest.mark.parametrize("bad", ["", "   ", None, 42])
    def test_rejects_empty_or_non_string(self, bad):
        with pytest.raises(EntityNameError):
            derive_names(bad)

    def test_derivation_is_deterministic(self):
        assert derive_names("User") == derive_names("User")


# ---------------------------------------------------------------------------
# Pluralization
# ---------------------------------------------------------------------------


class TestPluralize:
    def test_appends_fixed_suffix(self):
        assert pluralize("user") == "users"

    def test_irregular_nouns_not_special_cased(self):
        assert pluralize("category") == "categorys"
        assert pluralize("person") == "persons"


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


class TestOperations:
    def test_order_and_methods(self, user_names):
        ops = user_names.operations()
        assert [op.kind for op in ops] == ["list", "get", "create", "update", "delete"]
        assert [op.method for op in ops] == ["GET", "GET", "POST", "PATCH", "DELETE"]

    def test_id_usage(self, user_names):
        with_id = {op.kind: op.with_id for op in user_names.operations()}
        assert with_id == {
            "list": False,
            "get": True,
            "create": False,
            "update": True,
            "delete": True,
        }

    def test_queries_are_gets(self, user_names):
        queries = [op.kind for op in user_names.operations() if op.is_query]
        assert queries == ["list", "get"]

    def test_mutation_keys(self, user_names):
        assert user_names.mutation_key("create") == "user-create"
        assert user_names.mutation_key("delete") == "user-delete"
