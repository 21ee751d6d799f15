# src/component_framework/__init__.py
"""
Component Framework: componentes autocontidos para aplicações web.

Um componente é um diretório sob `<app root>/components/` que agrupa rotas,
helpers, migrations, assets e um módulo raiz opcionalmente com hooks
`init()` / `ready()`. Este pacote descobre esses diretórios, registra seus
paths na aplicação host e resolve settings YAML por ambiente.

Arquitetura em alto nível:
    - core.registry → descoberta e resolução de componentes
    - core.config   → settings em camadas (`<name>.yml` + `<name>.override.yml`)
    - core.host     → colaborador aplicação host
    - assets        → `require_components` e `@import "{all-components}"`
    - framework     → `initialize`, a ligação entre tudo isso

Uso:

    app = HostApplication(root)
    registry = initialize(app, FrameworkOptions(verbose=True))
    app.boot()
"""

from .core.config import ResolvedSettings, load_settings
from .core.errors import (
    ComponentFrameworkError,
    ComponentNotFoundError,
    InvalidSettingsRootTypeError,
    SettingsError,
    SettingsFileMissing,
    SettingsParseError,
)
from .core.host import HostApplication
from .core.options import FrameworkOptions
from .core.registry import ComponentRegistry
from .framework import initialize

__all__ = [
    "initialize",
    "load_settings",
    "ResolvedSettings",
    "ComponentRegistry",
    "FrameworkOptions",
    "HostApplication",
    "ComponentFrameworkError",
    "ComponentNotFoundError",
    "InvalidSettingsRootTypeError",
    "SettingsError",
    "SettingsFileMissing",
    "SettingsParseError",
]
