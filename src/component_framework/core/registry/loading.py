# src/component_framework/core/registry/loading.py
"""
Carga de pacotes de componentes a partir do filesystem.

Cada componente é um pacote Python em `<base_dir>/<name>/`. O pacote é
carregado a partir do seu `__init__.py` e registrado em `sys.modules` sob
o nome convencional (`billing`, `admin.billing_tools`), de modo que imports
internos do componente (`from billing.services import ...`) funcionem.
Sem `__init__.py`, o diretório vira um namespace package (PEP 420).

Um nome de topo que já resolve para outro módulo instalado (`calendar`,
`email`, ...) é uma colisão: o componente nunca toma o lugar dele.

Erros aqui são crus (`ImportError`, `ValueError`, ...): o registry é quem
os encapsula em `ComponentNotFoundError`.
"""

from __future__ import annotations

import importlib
import importlib.util
import sys
from importlib.machinery import ModuleSpec
from pathlib import Path
from types import ModuleType
from typing import Optional

from .component import INITIALIZER_FILE, PACKAGE_FILE
from .naming import module_name_for


def _defined_in(module: ModuleType, directory: Path) -> bool:
    locations = getattr(module, "__path__", None) or []
    target = directory.resolve()
    return any(Path(location).resolve() == target for location in locations)


def _installed_origin(dotted: str, directory: Path) -> Optional[str]:
    """Origem de um módulo instalado que já responde pelo nome de topo `dotted`."""
    if "." in dotted:
        return None
    try:
        spec = importlib.util.find_spec(dotted)
    except (ImportError, ValueError):
        return None
    if spec is None:
        return None

    locations = list(spec.submodule_search_locations or [])
    if spec.has_location and spec.origin:
        locations.append(spec.origin)
    target = directory.resolve()
    for location in locations:
        path = Path(location).resolve()
        if path == target or target in path.parents:
            return None
    return spec.origin or "<built-in>"


def _package_spec(dotted: str, directory: Path) -> ModuleSpec:
    init_file = directory / PACKAGE_FILE
    if not init_file.is_file():
        spec = ModuleSpec(dotted, None, is_package=True)
        spec.submodule_search_locations = [str(directory)]
        return spec

    spec = importlib.util.spec_from_file_location(
        dotted, init_file, submodule_search_locations=[str(directory)]
    )
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot build import spec for {init_file}", name=dotted)
    return spec


def _load_package_dir(dotted: str, directory: Path) -> ModuleType:
    existing = sys.modules.get(dotted)
    if existing is not None:
        if _defined_in(existing, directory):
            return existing
        origin = getattr(existing, "__file__", None) or "<built-in>"
        raise ImportError(f"module name {dotted!r} is already bound to {origin}", name=dotted)

    if not directory.is_dir():
        raise ModuleNotFoundError(f"no component directory at {directory}", name=dotted)

    origin = _installed_origin(dotted, directory)
    if origin is not None:
        raise ImportError(f"module name {dotted!r} is already bound to {origin}", name=dotted)

    spec = _package_spec(dotted, directory)
    module = importlib.util.module_from_spec(spec)
    sys.modules[dotted] = module
    try:
        if spec.loader is not None:
            spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(dotted, None)
        raise

    parent, _, child = dotted.rpartition(".")
    if parent:
        setattr(sys.modules[parent], child, module)
    return module


def load_component_package(base_dir: Path, name: str) -> ModuleType:
    """
    Carrega o pacote raiz do componente `name` (e seus pacotes pai, para
    nomes com namespace).
    """
    segments = module_name_for(name).split(".")
    module = None
    for depth in range(1, len(segments) + 1):
        module = _load_package_dir(".".join(segments[:depth]), Path(base_dir).joinpath(*segments[:depth]))
    return module


def load_initializer(package: ModuleType, directory: Path) -> Optional[ModuleType]:
    """
    Importa `<directory>/initialize.py` como submódulo `<package>.initialize`.

    Retorna `None` quando o arquivo não existe; qualquer outro erro de carga
    propaga. Importações repetidas devolvem o módulo já carregado.
    """
    if not (Path(directory) / INITIALIZER_FILE).is_file():
        return None
    return importlib.import_module(f"{package.__name__}.{Path(INITIALIZER_FILE).stem}")
