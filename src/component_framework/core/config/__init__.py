# src/component_framework/core/config/__init__.py

"""
Camada de settings em camadas do Component Framework.

Este pacote resolve arquivos `<name>.yml` por ambiente, aplicando um
`<name>.override.yml` opcional via deep-merge.

Responsabilidades do pacote:
    - Expansão de template (Jinja2) antes do parse
    - Parse YAML e projeção por ambiente
    - Deep-merge determinístico do override
    - Congelamento do resultado (`ResolvedSettings`)

Limites explícitos:
    - Não valida semântica das chaves
    - Não recarrega arquivos alterados em runtime
"""

from .loader import load_settings, project_environment
from .merge import deep_merge
from .resolved import ResolvedSettings
from .template import render_template

__all__ = [
    "load_settings",
    "project_environment",
    "deep_merge",
    "ResolvedSettings",
    "render_template",
]
