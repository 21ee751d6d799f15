# src/component_framework/core/host/eager_load.py
"""
Descoberta de arquivos para eager load.

A aplicação host percorre cada path de eager load e carrega todos os
módulos Python encontrados. O filtro é um predicado configurável aplicado a
cada arquivo (relativo ao seu load path), em vez de uma sobrescrita do
passo de carga.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

TEST_DIRECTORIES = frozenset({"test", "tests"})

EagerLoadFilter = Callable[[Path], bool]


def in_test_directory(relative: Path) -> bool:
    """Verdadeiro quando o arquivo está dentro de um diretório `test/` ou `tests/`."""
    return any(part in TEST_DIRECTORIES for part in Path(relative).parts[:-1])


def discover_eager_load_files(
    load_paths: Iterable[Path],
    exclude: Optional[EagerLoadFilter] = None,
) -> List[Tuple[Path, Path]]:
    """
    Pares `(load_path, arquivo)` de todos os `*.py` sob cada load path.

    Arquivos de um mesmo load path saem ordenados; load paths mantêm a ordem
    recebida. `exclude` recebe o caminho relativo ao load path e devolve
    `True` para descartar o arquivo.
    """
    found: List[Tuple[Path, Path]] = []
    for load_path in load_paths:
        load_path = Path(load_path)
        if not load_path.is_dir():
            continue
        for file in sorted(load_path.glob("**/*.py")):
            if exclude is not None and exclude(file.relative_to(load_path)):
                continue
            found.append((load_path, file))
    return found


def module_path_for(load_path: Path, file: Path) -> str:
    """`<load_path>/billing/services/charge.py` -> `billing.services.charge`."""
    parts = list(Path(file).relative_to(load_path).with_suffix("").parts)
    if parts and parts[-1] == "__init__":
        parts.pop()
    return ".".join(parts)
