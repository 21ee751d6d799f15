# src/component_framework/core/log.py
"""Log de inicialização dos componentes, condicionado a `verbose`."""

from __future__ import annotations

import logging
from typing import Optional

PREFIX = "[CF init] "

logger = logging.getLogger("component_framework")


class InitLog:
    """
    Emite mensagens informativas da inicialização apenas quando `verbose`.

    O valor de `verbose` é fixado na construção e só é lido depois disso.
    """

    def __init__(self, verbose: bool = False, target: Optional[logging.Logger] = None):
        self._verbose = bool(verbose)
        self._logger = target or logger

    @property
    def verbose(self) -> bool:
        return self._verbose

    def __call__(self, message: str) -> None:
        if not self._verbose:
            return
        self._logger.info(PREFIX + message)
