# src/component_framework/core/registry/registry.py
"""
Registro de componentes.

Este módulo define o `ComponentRegistry`, responsável por mapear nomes de
componentes para seus módulos raiz e por agregar os subpaths conhecidos de
cada componente (migrations, helpers, rotas, assets).

O mapeamento nome → módulo é explícito: um scan de startup registra uma
factory de carga para cada diretório descoberto, e componentes também podem
se registrar diretamente via `register`. A resolução nunca procura nomes
arbitrários no processo.

Decisões arquiteturais:
    - O registry não muta estado da aplicação host; ele só devolve listas
    - Toda falha de resolução vira `ComponentNotFoundError`
    - Listas de paths são sempre ordenadas
    - A ordem dos módulos segue `component_names()`

Invariantes:
    - `component_names()` é recalculado do filesystem a cada chamada
    - Um nome resolvido devolve sempre o mesmo objeto módulo
    - `initialize.py` de cada componente é carregado no máximo uma vez
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Callable, Dict, List, Optional, Set, Union

from ..errors import ComponentNotFoundError
from .component import (
    HELPERS_DIR,
    IMAGES_DIR,
    JAVASCRIPTS_DIR,
    MIGRATIONS_DIR,
    ROUTES_FILE,
    STYLESHEETS_DIR,
    Component,
)
from .discovery import DIRECTORY, FILE, collect_subpaths, list_component_names
from .loading import load_component_package, load_initializer

logger = logging.getLogger(__name__)

ModuleFactory = Callable[[], ModuleType]


@dataclass
class ComponentRegistry:
    """
    Registro canônico de componentes sob um diretório base.

    Uso típico:

        registry = ComponentRegistry(Path("app/components"))
        registry.scan()
        for module in registry.component_modules(load_initializers=True):
            ...
    """

    base_dir: Path

    _factories: Dict[str, ModuleFactory] = field(default_factory=dict, init=False, repr=False)
    _modules: Dict[str, ModuleType] = field(default_factory=dict, init=False, repr=False)
    _initialized: Set[str] = field(default_factory=set, init=False, repr=False)

    def __post_init__(self) -> None:
        self.base_dir = Path(self.base_dir).resolve()

    # -----------------------------
    # Discovery
    # -----------------------------
    def component_names(self) -> List[str]:
        return list_component_names(self.base_dir)

    def component(self, name: str) -> Component:
        return Component(self.base_dir, name)

    def components(self) -> List[Component]:
        return [self.component(name) for name in self.component_names()]

    # -----------------------------
    # Name -> module map
    # -----------------------------
    def register(self, name: str, module: Union[ModuleType, ModuleFactory]) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("component name must be a non-empty string")

        self._modules.pop(name, None)
        if isinstance(module, ModuleType):
            self._modules[name] = module
            self._factories[name] = lambda: module
        elif callable(module):
            self._factories[name] = module
        else:
            raise TypeError(f"expected a module or a factory, got {type(module).__name__}")

    def is_registered(self, name: str) -> bool:
        return name in self._factories

    def scan(self) -> List[str]:
        """Registra uma factory de carga para cada componente descoberto."""
        names = self.component_names()
        for name in names:
            if name not in self._factories:
                self._factories[name] = self._filesystem_factory(name)
        return names

    def _filesystem_factory(self, name: str) -> ModuleFactory:
        base_dir = self.base_dir
        return lambda: load_component_package(base_dir, name)

    def resolve_component_module(self, name: str) -> ModuleType:
        """
        Módulo raiz do componente `name`.

        Raises:
            ComponentNotFoundError: Nome desconhecido, malformado ou cujo
                pacote não pôde ser carregado. A causa fica em `__cause__`.
        """
        if name in self._modules:
            return self._modules[name]

        if not self._factories:
            self.scan()

        factory = self._factories.get(name) or self._filesystem_factory(name)
        try:
            module = factory()
        except Exception as e:  # noqa: BLE001
            logger.info("Component %s not found: %s", name, e)
            raise ComponentNotFoundError(name) from e

        self._modules[name] = module
        return module

    def component_modules(self, *, load_initializers: bool = False) -> List[ModuleType]:
        if load_initializers:
            self.load_initializers()
        return [self.resolve_component_module(name) for name in self.component_names()]

    def load_initializers(self) -> None:
        """
        Carrega o `initialize.py` opcional de cada componente.

        Arquivos ausentes são ignorados; erros de carga propagam.
        """
        for component in self.components():
            if component.name in self._initialized:
                continue
            if component.initializer_path.is_file():
                package = self.resolve_component_module(component.name)
                load_initializer(package, component.path)
            self._initialized.add(component.name)

    # -----------------------------
    # Subpaths
    # -----------------------------
    def collect_subpaths(self, pattern: str, kind: Optional[str] = None) -> List[Path]:
        return collect_subpaths(self.base_dir, pattern, kind)

    def migration_paths(self) -> List[Path]:
        return self.collect_subpaths(f"**/{MIGRATIONS_DIR}", DIRECTORY)

    def helper_paths(self) -> List[Path]:
        return self.collect_subpaths(f"**/{HELPERS_DIR}", DIRECTORY)

    def routing_paths(self) -> List[Path]:
        return self.collect_subpaths(f"**/{ROUTES_FILE}", FILE)

    def asset_paths(self) -> List[Path]:
        styles = self.collect_subpaths(f"**/{STYLESHEETS_DIR}", DIRECTORY)
        scripts = self.collect_subpaths(f"**/{JAVASCRIPTS_DIR}", DIRECTORY)
        images = self.collect_subpaths(f"**/{IMAGES_DIR}", DIRECTORY)
        return styles + scripts + images

    def manifest_paths(self, subpath: str) -> List[Path]:
        """Manifests `<component>/<subpath>` existentes, ordenados."""
        return sorted(
            component.manifest(subpath)
            for component in self.components()
            if component.manifest(subpath).is_file()
        )
