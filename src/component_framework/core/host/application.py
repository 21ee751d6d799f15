# src/component_framework/core/host/application.py
"""
Aplicação host.

`HostApplication` é o colaborador que o Component Framework configura:
ele mantém as listas ordenadas de load paths, o registro de initializers
em duas fases e o ambiente de assets, e executa o boot.

Fases do boot:
    1. initializers (na ordem de registro, com `after=` resolvido no boot),
       filtrados por grupo; podem registrar blocos `assets.configure`
    2. construção do `AssetEnvironment` (defaults + blocos configure)
    3. callbacks `after_initialize`, quando a aplicação inteira está pronta

Invariantes:
    - Cada aplicação sofre boot no máximo uma vez
    - Listas de paths preservam a ordem de inserção
"""

from __future__ import annotations

import fnmatch
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from ..config import ResolvedSettings, load_settings
from ..options import default_env
from .assets import AssetEnvironment
from .eager_load import EagerLoadFilter, discover_eager_load_files, module_path_for

logger = logging.getLogger(__name__)

ALL_GROUPS = "all"
DEFAULT_GROUP = "default"

AUTOLOAD = "autoload"
EAGER_LOAD = "eager_load"
MIGRATIONS = "db/migrate"
ROUTES = "config/routes"
HELPERS = "app/helpers"
CONFIG = "config"

Block = Callable[["HostApplication"], Any]
PrecompileEntry = Union[str, Callable[[str, str], bool]]


@dataclass
class Initializer:
    name: str
    block: Block
    group: str = DEFAULT_GROUP
    after: Optional[str] = None


@dataclass
class AssetConfig:
    paths: List[Path] = field(default_factory=list)
    precompile: List[PrecompileEntry] = field(default_factory=list)
    scss_support: bool = False
    _configure_blocks: List[Callable[[AssetEnvironment], Any]] = field(default_factory=list, repr=False)

    def configure(self, block: Callable[[AssetEnvironment], Any]) -> None:
        self._configure_blocks.append(block)


class HostApplication:
    def __init__(self, root: Union[str, Path], env: Optional[str] = None):
        self.root = Path(root).resolve()
        self.env = env or default_env()
        self.paths: Dict[str, List[Path]] = {
            AUTOLOAD: [],
            EAGER_LOAD: [],
            MIGRATIONS: [self.root / "db" / "migrate"],
            ROUTES: [self.root / "config" / "routes.py"],
            HELPERS: [self.root / "app" / "helpers"],
            CONFIG: [self.root / "config"],
        }
        self.assets = AssetConfig()
        self.asset_environment: Optional[AssetEnvironment] = None
        self.eager_load_filter: Optional[EagerLoadFilter] = None
        self.booted = False
        self._initializers: List[Initializer] = []
        self._after_initialize: List[Block] = []

    def add_path(self, path: Union[str, Path], *, eager_load: bool = False) -> None:
        path = Path(path)
        if path not in self.paths[AUTOLOAD]:
            self.paths[AUTOLOAD].append(path)
        if eager_load and path not in self.paths[EAGER_LOAD]:
            self.paths[EAGER_LOAD].append(path)

    # -----------------------------
    # Initializers
    # -----------------------------
    def initializer(
        self,
        name: str,
        block: Block,
        *,
        group: str = DEFAULT_GROUP,
        after: Optional[str] = None,
    ) -> Initializer:
        """
        Registra um initializer da fase 1.

        Com `after=`, o initializer roda logo depois do initializer com esse
        nome, mesmo que ele seja registrado mais tarde; se ele nunca for
        registrado, vale a ordem de registro.
        """
        if any(i.name == name for i in self._initializers):
            raise ValueError(f"Duplicate initializer: {name}")

        item = Initializer(name=name, block=block, group=group, after=after)
        self._initializers.append(item)
        return item

    def initializers(self) -> List[Initializer]:
        """
        Initializers na ordem de execução.

        Ordenação topológica estável: cada initializer com `after=` conhecido
        vem logo depois do seu alvo (dependentes de um mesmo alvo na ordem de
        registro); os demais seguem a ordem de registro.

        Raises:
            ValueError: Se as arestas `after=` formarem um ciclo.
        """
        known = {i.name for i in self._initializers}
        dependents: Dict[str, List[Initializer]] = {}
        roots: List[Initializer] = []
        for item in self._initializers:
            if item.after in known and item.after != item.name:
                dependents.setdefault(item.after, []).append(item)
            else:
                roots.append(item)

        ordered: List[Initializer] = []
        stack = list(reversed(roots))
        while stack:
            item = stack.pop()
            ordered.append(item)
            stack.extend(reversed(dependents.get(item.name, [])))

        if len(ordered) != len(self._initializers):
            placed = {i.name for i in ordered}
            cyclic = [i.name for i in self._initializers if i.name not in placed]
            raise ValueError(f"Cyclic initializer ordering: {', '.join(cyclic)}")
        return ordered

    def after_initialize(self, block: Block) -> None:
        self._after_initialize.append(block)

    def boot(self, group: str = DEFAULT_GROUP) -> "HostApplication":
        if self.booted:
            raise RuntimeError("application already booted")

        for item in self.initializers():
            if item.group in (group, ALL_GROUPS):
                logger.debug("Running initializer %s", item.name)
                item.block(self)

        self.asset_environment = self._build_asset_environment()

        for block in self._after_initialize:
            block(self)

        self.booted = True
        return self

    def _build_asset_environment(self) -> AssetEnvironment:
        environment = AssetEnvironment.default(self.assets.paths)
        for block in self.assets._configure_blocks:
            block(environment)
        return environment

    # -----------------------------
    # Assets / eager load / settings
    # -----------------------------
    def precompile_matches(self, logical_path: str, filename: Union[str, Path]) -> bool:
        for entry in self.assets.precompile:
            if callable(entry):
                if entry(logical_path, str(filename)):
                    return True
            elif fnmatch.fnmatch(logical_path, entry):
                return True
        return False

    def eager_load(self, require: Optional[Callable[[str], Any]] = None) -> List[str]:
        """
        Módulos dos load paths de eager load, filtrados por `eager_load_filter`.

        Quando `require` é fornecido, é chamado com cada nome de módulo.
        """
        modules = []
        for load_path, file in discover_eager_load_files(self.paths[EAGER_LOAD], self.eager_load_filter):
            module = module_path_for(load_path, file)
            modules.append(module)
            if require is not None:
                require(module)
        return modules

    def config_dir(self) -> Path:
        for path in self.paths[CONFIG]:
            if path.is_dir():
                return path
        return self.paths[CONFIG][0]

    def load_settings(self, name: str, env: Optional[str] = None) -> ResolvedSettings:
        return load_settings(name, env or self.env, config_dir=self.config_dir())
