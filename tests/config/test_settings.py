"""Tests for configuration settings."""

import importlib.util
import sys

import pytest

import selectorkit.config.settings as settings_module
from selectorkit.config import CodecSettings


def test_defaults():
    assert CodecSettings().indent is None


def test_explicit_values():
    assert CodecSettings(indent=4).indent == 4


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("SELECTORKIT_JSON_INDENT", "2")
    assert CodecSettings().indent == 2


def test_unrelated_environment_ignored(monkeypatch):
    monkeypatch.setenv("SELECTORKIT_JSON_UNKNOWN", "1")
    assert CodecSettings().indent is None


def test_indent_is_the_only_option():
    """Settings expose no options the encoder does not honour."""
    assert set(CodecSettings.model_fields) == {"indent"}


def test_missing_dependency_names_real_install(monkeypatch):
    """Import guard points at a package that actually provides the settings base."""
    monkeypatch.setitem(sys.modules, "pydantic_settings", None)
    spec = importlib.util.spec_from_file_location(
        "selectorkit_settings_without_dependency", settings_module.__file__
    )
    module = importlib.util.module_from_spec(spec)

    with pytest.raises(ImportError, match="pip install pydantic-settings"):
        spec.loader.exec_module(module)
