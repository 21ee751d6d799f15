# tests/core/host/test_host_assets.py
"""
Testes do ambiente de assets da aplicação host: diretivas e `@import`.
"""

from pathlib import Path

import pytest

from component_framework.core.host.assets import (
    CSS,
    JAVASCRIPT,
    SCSS,
    AssetEnvironment,
    DirectiveProcessor,
    ScssTemplate,
    split_header,
)


def test_split_header_stops_at_first_code_line():
    header, body = split_header("// a\n//= require b\n\nvar x = 1;\n// c\n")
    assert header == ["// a\n", "//= require b\n", "\n"]
    assert body == ["var x = 1;\n", "// c\n"]


def test_split_header_block_comment():
    header, body = split_header("/*\n *= require_self\n */\nbody { color: red; }\n")
    assert len(header) == 3
    assert body == ["body { color: red; }\n"]


def test_require_directive_resolves_and_strips(write_file, tmp_path: Path):
    lib = write_file(tmp_path / "js" / "lib.js", "var lib;\n")
    app = write_file(tmp_path / "js" / "app.js", "//= require lib\n//= require ./lib.js\nvar app;\n")
    env = AssetEnvironment.default()

    asset = env.process(app)

    assert asset.required == (lib.resolve(),)
    assert asset.source == "\n\nvar app;\n"
    assert asset.content_type == JAVASCRIPT


def test_require_searches_load_paths(write_file, tmp_path: Path):
    vendor = write_file(tmp_path / "vendor" / "jquery.js", "")
    app = write_file(tmp_path / "app" / "app.js", "//= require jquery\n")
    env = AssetEnvironment.default([tmp_path / "vendor"])

    assert env.process(app).required == (vendor.resolve(),)


def test_require_self_and_css_comments(write_file, tmp_path: Path):
    base = write_file(tmp_path / "css" / "base.css", "")
    app = write_file(tmp_path / "css" / "app.css", "/*\n *= require base\n *= require_self\n */\nbody {}\n")

    asset = AssetEnvironment.default().process(app)

    assert asset.required == (base.resolve(), app.resolve())
    assert asset.content_type == CSS


def test_missing_require_raises(write_file, tmp_path: Path):
    app = write_file(tmp_path / "app.js", "//= require nope\n")
    with pytest.raises(FileNotFoundError):
        AssetEnvironment.default().process(app)


def test_unknown_directive_line_is_kept(write_file, tmp_path: Path):
    app = write_file(tmp_path / "app.js", "//= frobnicate all\nvar app;\n")

    asset = AssetEnvironment.default().process(app)

    assert asset.source == "//= frobnicate all\nvar app;\n"
    assert asset.required == ()


def test_banner_comment_is_not_a_directive(write_file, tmp_path: Path):
    app = write_file(tmp_path / "app.css", "/* ==== Layout ==== */\nbody { color: red }\n")

    asset = AssetEnvironment.default().process(app)

    assert asset.source == "/* ==== Layout ==== */\nbody { color: red }\n"


def test_directive_lines_keep_body_line_numbers(write_file, tmp_path: Path):
    write_file(tmp_path / "base.css", "")
    source = "/*\n *= require base\n *= require_self\n */\nbody {}\n"
    app = write_file(tmp_path / "app.css", source)

    processed = AssetEnvironment.default().process(app).source

    assert processed == "/*\n\n\n */\nbody {}\n"
    assert processed.splitlines().index("body {}") == source.splitlines().index("body {}")


def test_register_and_unregister_preprocessor():
    env = AssetEnvironment.default()
    env.unregister_preprocessor(JAVASCRIPT, DirectiveProcessor)
    env.unregister_preprocessor(JAVASCRIPT, DirectiveProcessor)

    assert env.preprocessors(JAVASCRIPT) == []
    assert env.preprocessors(CSS) == [DirectiveProcessor]


def test_scss_template_expands_imports(write_file, tmp_path: Path):
    write_file(tmp_path / "css" / "_colors.scss", "$red: #f00;\n")
    write_file(tmp_path / "css" / "mixins.scss", "@import 'colors';\n.m {}\n")
    app = write_file(tmp_path / "css" / "app.scss", '@import "mixins";\nbody { color: $red; }\n')
    env = AssetEnvironment.default()
    env.register_transformer(SCSS, CSS, ScssTemplate())

    asset = env.process(app)

    assert asset.source == "$red: #f00;\n.m {}\nbody { color: $red; }\n"
    assert asset.content_type == CSS
    assert (tmp_path / "css" / "_colors.scss").resolve() in asset.dependencies


def test_scss_missing_import_raises(write_file, tmp_path: Path):
    app = write_file(tmp_path / "app.scss", '@import "nothing";\n')
    env = AssetEnvironment.default()
    env.register_transformer(SCSS, CSS, ScssTemplate())

    with pytest.raises(FileNotFoundError):
        env.process(app)


def test_unsupported_asset_type(write_file, tmp_path: Path):
    with pytest.raises(ValueError):
        AssetEnvironment.default().process(write_file(tmp_path / "logo.svg", "<svg/>"))
