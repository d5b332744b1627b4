"""Tests for writing the root component template."""

import os

from ngscaffold.app_template import render_app_template, write_app_template
from ngscaffold.config import ScaffoldConfig

CONFIG = ScaffoldConfig()


def _app_html(project_dir):
    return os.path.join(project_dir, "src", "app", "app.html")


class TestRenderAppTemplate:

    def test_lists_ui_packages(self):
        content = render_app_template(CONFIG)

        assert "bootstrap</li>" in content
        assert "@fortawesome/fontawesome-free</li>" in content

    def test_uses_bootstrap_and_font_awesome_markup(self):
        content = render_app_template(CONFIG)

        assert 'class="navbar' in content
        assert 'class="fa-solid' in content
        assert "<router-outlet />" in content

    def test_is_constant(self):
        assert render_app_template(CONFIG) == render_app_template(ScaffoldConfig())


class TestWriteAppTemplate:

    def test_creates_missing_directories(self, tmp_path):
        path = write_app_template(str(tmp_path), CONFIG)

        assert path == _app_html(str(tmp_path))
        assert os.path.isfile(path)

    def test_overwrites_regardless_of_prior_content(self, tmp_path):
        first = tmp_path / "first"
        second = tmp_path / "second"
        os.makedirs(first / "src" / "app")
        (first / "src" / "app" / "app.html").write_text("<p>old content that is much longer</p>\n" * 50)

        write_app_template(str(first), CONFIG)
        write_app_template(str(second), CONFIG)

        with open(_app_html(str(first)), "rb") as a, open(_app_html(str(second)), "rb") as b:
            assert a.read() == b.read()

    def test_repeated_writes_are_byte_identical(self, tmp_path):
        write_app_template(str(tmp_path), CONFIG)
        with open(_app_html(str(tmp_path)), "rb") as f:
            first = f.read()

        write_app_template(str(tmp_path), CONFIG)

        with open(_app_html(str(tmp_path)), "rb") as f:
            assert f.read() == first
