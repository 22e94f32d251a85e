"""Shared pytest fixtures for the crudgen test suite.

Provides reusable fixtures for:
- Sample entity schemas (raw and built)
- Derived names for the sample entity
- Generator configurations for both hooks layouts
- Temporary output roots
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from crudgen.codegen import GeneratorConfig, build_schema, derive_names
from crudgen.codegen.core.templates import DocumentRenderer


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------


@pytest.fixture
def user_fields() -> dict:
    """Raw field mapping for the User entity, in insertion order."""
    return {
        "id": {"name": "id", "type": "string"},
        "email": {"name": "email", "type": "string"},
    }


@pytest.fixture
def product_fields() -> dict:
    """A wider schema with union and array types."""
    return {
        "sku": {"name": "sku", "type": "string"},
        "price": {"name": "price", "type": "number"},
        "tags": {"name": "tags", "type": "string[]", "description": "ignored"},
        "status": {"name": "status", "type": "'active' | 'retired'"},
    }


@pytest.fixture
def user_schema(user_fields):
    return build_schema(user_fields)


@pytest.fixture
def user_names():
    return derive_names("User")


@pytest.fixture
def schema_file(tmp_path: Path, user_fields) -> Path:
    """The User schema written to a JSON file."""
    path = tmp_path / "user.json"
    path.write_text(json.dumps(user_fields), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Configuration & rendering
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> GeneratorConfig:
    return GeneratorConfig()


@pytest.fixture
def per_operation_config() -> GeneratorConfig:
    return GeneratorConfig(hooks_layout="per_operation")


@pytest.fixture
def renderer() -> DocumentRenderer:
    return DocumentRenderer()


# ---------------------------------------------------------------------------
# Output directories
# ---------------------------------------------------------------------------


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    """Empty target root for generated files (auto-cleanup)."""
    root = tmp_path / "src" / "entities"
    root.mkdir(parents=True)
    return root
