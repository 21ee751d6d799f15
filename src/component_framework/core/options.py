# src/component_framework/core/options.py
"""
Opções de inicialização do Component Framework.

As opções são um valor imutável passado explicitamente para
`component_framework.initialize`; não existe flag global de verbosidade.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_VAR = "APP_ENV"
DEFAULT_ENV = "development"
COMPONENTS_DIRNAME = "components"


def default_env() -> str:
    """Ambiente corrente do processo (`$APP_ENV`, senão `development`)."""
    return os.environ.get(ENV_VAR) or DEFAULT_ENV


@dataclass(frozen=True)
class FrameworkOptions:
    """
    Configuração da inicialização dos componentes.

    Atributos:
        base_dir: raiz dos componentes. Padrão: `<app root>/components`.
        assets_pipeline: registra paths e processadores de assets.
        verbose: emite o log de inicialização (`[CF init] ...`).
    """

    base_dir: Optional[Path] = None
    assets_pipeline: bool = True
    verbose: bool = False

    def components_base_dir(self, app_root: Path) -> Path:
        if self.base_dir is not None:
            return Path(self.base_dir)
        return Path(app_root) / COMPONENTS_DIRNAME
