# tests/conftest.py
"""
Fixtures compartilhados para testes do Component Framework.

Este módulo define fixtures reutilizáveis que fornecem:
- uma raiz de aplicação em `tmp_path` com `components/` e `config/`
- uma factory para materializar componentes no filesystem
- um gravador de eventos compartilhado entre componentes (`cf_events`)
- isolamento de `sys.modules` entre testes

Decisões arquiteturais:
    - Componentes de teste são pacotes reais escritos em disco
    - Módulos carregados a partir de `tmp_path` são removidos de
      `sys.modules` ao fim de cada teste, para que testes diferentes possam
      reutilizar nomes como `billing`
    - Módulos do próprio pacote nunca são removidos (identidade das classes
      de exceção precisa ser estável)
"""

import sys
import textwrap
import types
from pathlib import Path
from typing import Dict, Optional

import pytest


@pytest.fixture(autouse=True)
def _evict_component_modules(tmp_path: Path):
    yield
    prefix = str(tmp_path.resolve())
    for name, module in list(sys.modules.items()):
        # namespace packages não têm __file__, só __path__
        origins = [getattr(module, "__file__", None) or ""]
        origins.extend(str(p) for p in list(getattr(module, "__path__", None) or []))
        if any(origin.startswith(prefix) for origin in origins):
            del sys.modules[name]


@pytest.fixture
def app_root(tmp_path: Path) -> Path:
    root = tmp_path / "app"
    (root / "components").mkdir(parents=True)
    (root / "config").mkdir()
    return root


@pytest.fixture
def components_dir(app_root: Path) -> Path:
    return app_root / "components"


@pytest.fixture
def config_dir(app_root: Path) -> Path:
    return app_root / "config"


@pytest.fixture
def events(monkeypatch):
    """
    Gravador de eventos importável pelos componentes (`import cf_events`).

    Componentes registram `(nome, evento)` em `cf_events.events`, o que
    permite verificar ordem de hooks entre componentes diferentes.
    """
    recorder = types.ModuleType("cf_events")
    recorder.events = []
    monkeypatch.setitem(sys.modules, "cf_events", recorder)
    return recorder.events


def _write(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


@pytest.fixture
def make_component(components_dir: Path):
    """
    Factory que materializa um componente em `components/<name>/`.

    Args (da factory):
        name: nome do diretório (aceita `/` para namespaces)
        source: conteúdo de `__init__.py` (None → sem `__init__.py`)
        files: mapa `caminho relativo -> conteúdo` para arquivos extras
        dirs: diretórios vazios extras (ex.: `migrations`)
    """

    def _make(
        name: str,
        source: Optional[str] = "",
        files: Optional[Dict[str, str]] = None,
        dirs=(),
    ) -> Path:
        root = components_dir / name
        root.mkdir(parents=True, exist_ok=True)
        if source is not None:
            _write(root / "__init__.py", source)
        for relative, content in (files or {}).items():
            _write(root / relative, content)
        for relative in dirs:
            (root / relative).mkdir(parents=True, exist_ok=True)
        return root

    return _make


@pytest.fixture
def write_file():
    return _write


HOOKED_COMPONENT = """\
import cf_events

def init():
    cf_events.events.append(("{name}", "init"))

def ready():
    cf_events.events.append(("{name}", "ready"))
"""


@pytest.fixture
def hooked_source():
    """Fonte de `__init__.py` com hooks `init`/`ready` que gravam em `cf_events`."""
    return lambda name: HOOKED_COMPONENT.format(name=name)
