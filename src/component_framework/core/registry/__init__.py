"""
# Component Registry

Descoberta de componentes sob um diretório base e resolução de seus módulos
raiz.

## Componentes

- **discovery**: `list_component_names`, `collect_subpaths` (funções puras)
- **naming**: `module_name_for`
- **component**: `Component`, modelo derivado de `(base_dir, name)`
- **loading**: carga de pacotes e `initialize.py` a partir do filesystem
- **registry**: `ComponentRegistry`, mapa explícito nome → módulo

## Limites Explícitos

- Não registra paths na aplicação host (ver `component_framework.framework`)
- Não chama hooks `init` / `ready`
"""

from .component import Component
from .discovery import collect_subpaths, list_component_names
from .naming import module_name_for
from .registry import ComponentRegistry

__all__ = [
    "Component",
    "ComponentRegistry",
    "collect_subpaths",
    "list_component_names",
    "module_name_for",
]
