# src/component_framework/core/registry/discovery.py
"""
Descoberta de componentes no filesystem.

Funções puras sobre um diretório base. Nada aqui é cacheado: cada chamada
reflete o estado atual do filesystem.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

DIRECTORY = "dir"
FILE = "file"


def list_component_names(base_dir: Path) -> List[str]:
    """
    Nomes dos componentes: subdiretórios imediatos de `base_dir`, ordenados.

    Arquivos soltos são ignorados. Um `base_dir` inexistente não tem
    componentes.
    """
    base_dir = Path(base_dir)
    if not base_dir.is_dir():
        return []

    return sorted(
        entry.name
        for entry in base_dir.iterdir()
        if entry.name not in (".", "..") and entry.is_dir()
    )


def collect_subpaths(base_dir: Path, pattern: str, kind: Optional[str] = None) -> List[Path]:
    """
    Paths sob `base_dir` que casam com o glob relativo `pattern`.

    O resultado é sempre ordenado: a ordem de carga de rotas, helpers e
    assets depende dela.

    Args:
        base_dir (Path): Raiz dos componentes.
        pattern (str): Glob relativo, ex.: `"**/migrations"`, `"*/routes.py"`.
        kind (Optional[str]): `"dir"` ou `"file"` para filtrar o tipo de entrada.
    """
    base_dir = Path(base_dir)
    if not base_dir.is_dir():
        return []

    if kind not in (None, DIRECTORY, FILE):
        raise ValueError(f"kind must be 'dir', 'file' or None, got {kind!r}")

    matches = base_dir.glob(pattern)
    if kind == DIRECTORY:
        matches = (p for p in matches if p.is_dir())
    elif kind == FILE:
        matches = (p for p in matches if p.is_file())

    return sorted(matches)
