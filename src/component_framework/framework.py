# src/component_framework/framework.py
"""
Inicialização do Component Framework em uma aplicação host.

`initialize` descobre os componentes, registra seus paths na aplicação e
agenda os hooks de ciclo de vida:

    - `init()`  → fase 1, durante os initializers da aplicação (ex.: registrar
                  middleware)
    - `ready()` → fase 2, depois que a aplicação inteira terminou de inicializar
                  (ex.: ligar componentes entre si)

Ambos os hooks são opcionais e são chamados na ordem dos nomes dos
componentes.
"""

from __future__ import annotations

from types import ModuleType
from typing import Iterable, Optional

from .assets import install as install_assets
from .core.host.application import ALL_GROUPS, HELPERS, MIGRATIONS, ROUTES, HostApplication
from .core.host.eager_load import in_test_directory
from .core.log import InitLog
from .core.options import FrameworkOptions
from .core.registry import ComponentRegistry

INIT_HOOK = "init"
READY_HOOK = "ready"
INITIALIZER_NAME = "initialize_components"


def _call_hook(modules: Iterable[ModuleType], hook: str) -> None:
    for module in modules:
        callback = getattr(module, hook, None)
        if callable(callback):
            callback()


def initialize(application: HostApplication, options: Optional[FrameworkOptions] = None) -> ComponentRegistry:
    """
    Configura `application` para os componentes sob `options.base_dir`.

    Args:
        application (HostApplication): Aplicação a configurar (antes do boot).
        options (Optional[FrameworkOptions]): Opções de inicialização.

    Returns:
        ComponentRegistry: Registro usado pelos initializers registrados.
    """
    options = options or FrameworkOptions()
    log = InitLog(options.verbose)
    registry = ComponentRegistry(options.components_base_dir(application.root))

    log("Components Initialization Started")
    log(f"Components Path: {registry.base_dir}")

    # autoload + eager load, com os diretórios de teste fora do eager load
    application.add_path(registry.base_dir, eager_load=True)
    application.eager_load_filter = in_test_directory

    names = registry.scan()
    log(f"Discovered Components: {', '.join(names)}")

    log("Register DB Migrations")
    application.paths[MIGRATIONS].extend(registry.migration_paths())

    log("Register Components Routes")
    application.paths[ROUTES][:0] = registry.routing_paths()

    log("Register Components Helpers")
    application.paths[HELPERS][:0] = registry.helper_paths()

    if options.assets_pipeline:
        install_assets(application, registry, log)

    def initialize_components(app: HostApplication) -> None:
        modules = registry.component_modules(load_initializers=True)
        log("Initialize Components")
        _call_hook(modules, INIT_HOOK)

    def ready_components(app: HostApplication) -> None:
        modules = registry.component_modules()
        log("Post-Initialize Components")
        _call_hook(modules, READY_HOOK)
        log("Components Initialization Done")

    application.initializer(INITIALIZER_NAME, initialize_components, group=ALL_GROUPS)
    application.after_initialize(ready_components)

    log("Configuration Finished")
    return registry
