"""Shared fixtures for orchestrator tests."""

import os
import sys

import pytest

# Ensure tests/orchestrator/ is on sys.path so test files can import
# the fakes and builders unambiguously.
sys.path.insert(0, os.path.dirname(__file__))

from fake_process_runner import FakeProcessRunner  # noqa: E402
from generated_project import GENERATOR_PREFIX, write_generated_project  # noqa: E402


def pytest_collection_modifyitems(items):
    for item in items:
        if "orchestrator" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def fake_runner():
    return FakeProcessRunner()


@pytest.fixture
def generating_runner(tmp_path):
    """Factory for a FakeProcessRunner whose generator command creates the project on disk."""
    def _make(project_name="my-app", polyfills=None, serve_returncode=0):
        runner = FakeProcessRunner(serve_returncode=serve_returncode)
        runner.on_command(
            GENERATOR_PREFIX,
            lambda: write_generated_project(str(tmp_path), project_name, polyfills=polyfills),
        )
        return runner
    return _make
