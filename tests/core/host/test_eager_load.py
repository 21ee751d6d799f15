# tests/core/host/test_eager_load.py
from pathlib import Path

from component_framework.core.host.application import EAGER_LOAD, HostApplication
from component_framework.core.host.eager_load import (
    discover_eager_load_files,
    in_test_directory,
    module_path_for,
)


def _touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")


def test_in_test_directory():
    assert in_test_directory(Path("billing/test/test_charge.py"))
    assert in_test_directory(Path("billing/tests/unit/test_charge.py"))
    assert not in_test_directory(Path("billing/services/test_helpers.py"))
    assert not in_test_directory(Path("billing/testing.py"))


def test_discover_excludes_with_predicate(tmp_path: Path):
    root = tmp_path / "components"
    for relative in ("billing/__init__.py", "billing/models.py", "billing/test/test_models.py", "auth/__init__.py"):
        _touch(root / relative)

    found = discover_eager_load_files([root], exclude=in_test_directory)

    assert [f.relative_to(root).as_posix() for _, f in found] == [
        "auth/__init__.py",
        "billing/__init__.py",
        "billing/models.py",
    ]


def test_discover_without_filter_keeps_everything(tmp_path: Path):
    root = tmp_path / "lib"
    _touch(root / "a.py")
    _touch(root / "tests" / "test_a.py")

    assert len(discover_eager_load_files([root, tmp_path / "missing"])) == 2


def test_module_path_for(tmp_path: Path):
    assert module_path_for(tmp_path, tmp_path / "billing" / "services" / "charge.py") == "billing.services.charge"
    assert module_path_for(tmp_path, tmp_path / "billing" / "__init__.py") == "billing"


def test_host_eager_load_applies_filter(app_root: Path):
    components = app_root / "components"
    _touch(components / "billing" / "__init__.py")
    _touch(components / "billing" / "tests" / "test_x.py")
    app = HostApplication(app_root)
    app.paths[EAGER_LOAD].append(components)
    app.eager_load_filter = in_test_directory
    required = []

    modules = app.eager_load(required.append)

    assert modules == ["billing"]
    assert required == ["billing"]
