"""Tests for config loading and validation."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from assertkit import DEFAULT_CONFIG, AssertConfig, load_config


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "assertkit.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_defaults():
    assert DEFAULT_CONFIG.none_token == "None"
    assert DEFAULT_CONFIG.quote == '"'
    assert DEFAULT_CONFIG.diff_context == 20
    assert DEFAULT_CONFIG.heading == "The following assertions failed"
    assert DEFAULT_CONFIG.indent == "\t"


def test_load_top_level_settings(tmp_yaml):
    path = tmp_yaml("""\
        none_token: "null"
        diff_context: 5
    """)
    config = load_config(path)
    assert config.none_token == "null"
    assert config.diff_context == 5
    assert config.quote == '"'


def test_load_settings_under_assertkit_key(tmp_yaml):
    path = tmp_yaml("""\
        assertkit:
          heading: Problems found
    """)
    assert load_config(path).heading == "Problems found"


def test_empty_file_gives_defaults(tmp_yaml):
    assert load_config(tmp_yaml("")) == DEFAULT_CONFIG


def test_empty_assertkit_key_gives_defaults(tmp_yaml):
    assert load_config(tmp_yaml("assertkit:\n")) == DEFAULT_CONFIG


def test_unknown_key_rejected(tmp_yaml):
    path = tmp_yaml("""\
        none_tokn: "null"
    """)
    with pytest.raises(ValidationError):
        load_config(path)


def test_blank_heading_rejected():
    with pytest.raises(ValidationError, match="heading must not be blank"):
        AssertConfig(heading="   ")


def test_negative_diff_context_rejected():
    with pytest.raises(ValidationError):
        AssertConfig(diff_context=-1)


def test_non_mapping_rejected(tmp_yaml):
    with pytest.raises(ValueError, match="must contain a mapping"):
        load_config(tmp_yaml("- a\n- b\n"))


def test_config_is_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_CONFIG.diff_context = 3
