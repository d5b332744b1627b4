"""Tests for stripping zone.js imports from polyfills.ts."""

from ngscaffold.polyfills import patch_polyfills, strip_imports

GENERATED = (
    "/**\n"
    " * Zone JS is required by default for Angular itself.\n"
    " */\n"
    "import 'zone.js';  // Included with Angular CLI.\n"
    "import './local-polyfill';\n"
)


class TestStripImports:

    def test_removes_single_quoted_import(self):
        assert strip_imports("import 'zone.js';\nimport './a';\n", "zone.js") == "import './a';\n"

    def test_removes_double_quoted_and_subpath_imports(self):
        text = 'import "zone.js";\nimport "zone.js/testing";\nconst x = 1;\n'
        assert strip_imports(text, "zone.js") == "const x = 1;\n"

    def test_removes_import_without_semicolon_on_last_line(self):
        assert strip_imports("import './a';\nimport 'zone.js'", "zone.js") == "import './a';\n"

    def test_removes_import_with_trailing_comment(self):
        assert "zone.js';" not in strip_imports(GENERATED, "zone.js")
        assert strip_imports(GENERATED, "zone.js").endswith(" */\nimport './local-polyfill';\n")

    def test_keeps_similarly_named_packages(self):
        text = "import 'zone.js-extra';\nimport 'my-zone.js';\n"
        assert strip_imports(text, "zone.js") == text

    def test_preserves_crlf_line_endings(self):
        text = "import 'zone.js';\r\nimport './a';\r\n"
        assert strip_imports(text, "zone.js") == "import './a';\r\n"


class TestPatchPolyfills:

    def test_missing_file_returns_false(self, tmp_path):
        assert patch_polyfills(str(tmp_path / "polyfills.ts"), "zone.js") is False
        assert not (tmp_path / "polyfills.ts").exists()

    def test_rewrites_file(self, tmp_path):
        path = tmp_path / "polyfills.ts"
        path.write_text("import 'zone.js';\nimport './a';\n", encoding="utf-8")

        assert patch_polyfills(str(path), "zone.js") is True
        assert path.read_text(encoding="utf-8") == "import './a';\n"

    def test_already_stripped_file_is_byte_identical(self, tmp_path):
        path = tmp_path / "polyfills.ts"
        path.write_bytes(b"import './a';\r\n// done\n")
        before = path.read_bytes()

        patch_polyfills(str(path), "zone.js")
        patch_polyfills(str(path), "zone.js")

        assert path.read_bytes() == before
