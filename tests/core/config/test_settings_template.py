# tests/core/config/test_settings_template.py
"""
Testes da etapa de template dos arquivos de settings.
"""

from pathlib import Path

import pytest

from component_framework.core.config.loader import load_settings
from component_framework.core.config.template import render_template
from component_framework.core.errors import SettingsParseError


def test_render_exposes_process_environment(monkeypatch):
    monkeypatch.setenv("CF_DB_HOST", "db.internal")
    assert render_template("host: {{ env.CF_DB_HOST }}", source="inline") == "host: db.internal"


def test_render_accepts_extra_context():
    assert render_template("pool: {{ pool * 2 }}", source="inline", context={"pool": 5}) == "pool: 10"


def test_undefined_variable_raises_with_source():
    with pytest.raises(SettingsParseError) as excinfo:
        render_template("host: {{ missing_value }}", source="config/foo.yml")

    assert "config/foo.yml" in str(excinfo.value)


def test_template_syntax_error_raises():
    with pytest.raises(SettingsParseError):
        render_template("host: {{ oops", source="inline")


def test_templated_file_is_expanded_before_parse(config_dir: Path, monkeypatch):
    monkeypatch.setenv("CF_DB_HOST", "db.internal")
    (config_dir / "foo.yml").write_text(
        "db:\n  test:\n    host: {{ env.CF_DB_HOST }}\n    pool: {{ env.get('CF_DB_POOL', 5) }}\n",
        encoding="utf-8",
    )

    out = load_settings("foo", "test", config_dir=config_dir)

    assert out["db"].to_dict() == {"host": "db.internal", "pool": 5}
