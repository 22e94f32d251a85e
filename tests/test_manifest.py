"""Unit tests for top-level manifest maintenance (crudgen.codegen.manifest).

Tests cover:
- Creating a missing manifest (and its directory)
- Idempotent appends
- Line-set membership instead of substring matching
- Files without a trailing newline
- Read failures treated as an absent line
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from crudgen.codegen import FilesystemError, ensure_exported
from crudgen.codegen.manifest import parse_manifest

USER_LINE = "export * from './User';"


class TestParseManifest:
    def test_trims_and_drops_blank_lines(self):
        assert parse_manifest("  a;  \n\n\tb;\n") == {"a;", "b;"}

    def test_empty(self):
        assert parse_manifest("") == set()


class TestEnsureExported:
    def test_creates_missing_manifest(self, tmp_path: Path):
        manifest = tmp_path / "nested" / "index.ts"
        assert ensure_exported(manifest, USER_LINE) is True
        assert manifest.read_text(encoding="utf-8") == f"{USER_LINE}\n"

    def test_idempotent(self, tmp_path: Path):
        manifest = tmp_path / "index.ts"
        ensure_exported(manifest, USER_LINE)
        assert ensure_exported(manifest, USER_LINE) is False
        assert ensure_exported(manifest, USER_LINE) is False
        assert manifest.read_text(encoding="utf-8").count(USER_LINE) == 1

    def test_keeps_existing_lines(self, tmp_path: Path):
        manifest = tmp_path / "index.ts"
        manifest.write_text("export * from './Order';\n", encoding="utf-8")
        ensure_exported(manifest, USER_LINE)
        assert manifest.read_text(encoding="utf-8") == (
            "export * from './Order';\n" f"{USER_LINE}\n"
        )

    def test_substring_does_not_count_as_present(self, tmp_path: Path):
        manifest = tmp_path / "index.ts"
        manifest.write_text("// export * from './User';\n", encoding="utf-8")
        assert ensure_exported(manifest, USER_LINE) is True
        assert USER_LINE in parse_manifest(manifest.read_text(encoding="utf-8"))

    def test_longer_line_does_not_match(self, tmp_path: Path):
        manifest = tmp_path / "index.ts"
        manifest.write_text("export * from './User';export * from './X';\n", encoding="utf-8")
        assert ensure_exported(manifest, USER_LINE) is True

    def test_whitespace_variant_counts_as_present(self, tmp_path: Path):
        manifest = tmp_path / "index.ts"
        manifest.write_text(f"   {USER_LINE}  \n", encoding="utf-8")
        assert ensure_exported(manifest, USER_LINE) is False

    def test_missing_trailing_newline(self, tmp_path: Path):
        manifest = tmp_path / "index.ts"
        manifest.write_text("export * from './Order';", encoding="utf-8")
        ensure_exported(manifest, USER_LINE)
        assert manifest.read_text(encoding="utf-8").splitlines() == [
            "export * from './Order';",
            USER_LINE,
        ]

    def test_read_failure_appends(self, tmp_path: Path):
        manifest = tmp_path / "index.ts"
        manifest.write_bytes(b"\xff\xfe not utf-8\n")
        assert ensure_exported(manifest, USER_LINE) is True
        assert manifest.read_bytes().endswith(f"{USER_LINE}\n".encode("utf-8"))

    def test_undecodable_manifest_without_trailing_newline(self, tmp_path: Path):
        manifest = tmp_path / "index.ts"
        manifest.write_bytes(b"export * from './Order';\xff")
        assert ensure_exported(manifest, USER_LINE) is True
        assert manifest.read_bytes().splitlines() == [
            b"export * from './Order';\xff",
            USER_LINE.encode("utf-8"),
        ]

    def test_append_failure_raises(self, tmp_path: Path):
        manifest = tmp_path / "index.ts"
        manifest.touch()
        with patch("builtins.open", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(FilesystemError) as exc_info:
                ensure_exported(manifest, USER_LINE)
        assert exc_info.value.path == manifest
        assert exc_info.value.reason == "Permission denied"
