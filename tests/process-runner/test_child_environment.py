"""Tests for the forced child environment."""

import dataclasses

import pytest

from ngscaffold.config import ChildEnvironment


class TestChildEnvironment:

    def test_default_variables(self):
        assert ChildEnvironment().variables() == {
            "NG_CLI_ANALYTICS": "false",
            "NODE_OPTIONS": "--max-old-space-size=4096",
        }

    def test_heap_size_is_configurable(self):
        env = ChildEnvironment(max_old_space_size=8192)
        assert env.variables()["NODE_OPTIONS"] == "--max-old-space-size=8192"

    def test_merge_overrides_base_and_keeps_other_variables(self):
        base = {"PATH": "/usr/bin", "NODE_OPTIONS": "--inspect"}

        merged = ChildEnvironment().merged_with(base)

        assert merged["PATH"] == "/usr/bin"
        assert merged["NODE_OPTIONS"] == "--max-old-space-size=4096"
        assert base["NODE_OPTIONS"] == "--inspect"

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ChildEnvironment().analytics = "true"
