"""Unit tests for the template engine and document renderer."""

from __future__ import annotations

import pytest

from crudgen.codegen.core.document import (
    Document,
    ImportDecl,
    InterfaceDecl,
    Property,
    ReExportDecl,
    TypeAliasDecl,
)
from crudgen.codegen.core.templates import (
    DocumentRenderer,
    TemplateEngine,
    TemplateError,
    format_code,
)


# ---------------------------------------------------------------------------
# format_code
# ---------------------------------------------------------------------------


class TestFormatCode:
    def test_strips_trailing_whitespace(self):
        assert format_code("a;   \nb;\t") == "a;\nb;\n"

    def test_collapses_blank_runs(self):
        assert format_code("a;\n\n\n\nb;") == "a;\n\nb;\n"

    def test_single_trailing_newline(self):
        assert format_code("\n\na;\n\n\n") == "a;\n"


# ---------------------------------------------------------------------------
# TemplateEngine
# ---------------------------------------------------------------------------


class TestTemplateEngine:
    def test_bundled_templates_exist(self):
        engine = TemplateEngine()
        for name in ("import.ts.j2", "request.ts.j2", "mutation_hook.ts.j2"):
            assert engine.template_exists(name)

    def test_missing_template(self):
        with pytest.raises(TemplateError, match="Template not found"):
            TemplateEngine().render_template("nope.ts.j2", {})

    def test_missing_directory_has_no_templates(self, tmp_path):
        engine = TemplateEngine(tmp_path / "absent")
        assert not engine.template_exists("import.ts.j2")

    def test_undefined_variable_is_an_error(self, tmp_path):
        (tmp_path / "broken.j2").write_text("{{ missing.attr }}", encoding="utf-8")
        with pytest.raises(TemplateError, match="broken.j2"):
            TemplateEngine(tmp_path).render_template("broken.j2", {})


# ---------------------------------------------------------------------------
# DocumentRenderer
# ---------------------------------------------------------------------------


class TestDocumentRenderer:
    def test_imports_then_declarations(self, renderer):
        document = Document(
            path="types/x.ts",
            imports=(ImportDecl(("A",), "./a"), ImportDecl(("B",), "./b")),
            declarations=(
                InterfaceDecl("Thing", (Property("id", "string"),)),
                TypeAliasDecl("Other", "Thing", exported=False),
            ),
        )
        assert renderer.render(document) == (
            "import { A } from './a';\n"
            "import { B } from './b';\n"
            "\n"
            "export interface Thing {\n"
            "  id: string;\n"
            "}\n"
            "\n"
            "type Other = Thing;\n"
        )

    def test_long_import_wraps(self, renderer):
        names = tuple(f"SomeRatherLongSymbolName{i}" for i in range(4))
        text = renderer.render(Document(path="x.ts", imports=(ImportDecl(names, "./m"),)))
        assert text.startswith("import {\n  SomeRatherLongSymbolName0,\n")
        assert text.endswith("} from './m';\n")

    def test_separator(self, renderer):
        document = Document(
            path="index.ts",
            declarations=(
                ReExportDecl(("a",), "./a"),
                ReExportDecl(("B",), "./b", type_only=True),
            ),
            separator="\n",
        )
        assert renderer.render(document) == (
            "export { a } from './a';\nexport type { B } from './b';\n"
        )

    def test_module_specifier(self):
        assert Document(path="api/userRequest.ts").module_specifier == "./api/userRequest"
