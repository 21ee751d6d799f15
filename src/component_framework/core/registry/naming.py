# src/component_framework/core/registry/naming.py
"""
Convenção de nomes de componentes.

Um componente é identificado pelo nome do seu diretório (`billing`,
`admin/billing_tools`). Este módulo converte esse nome para o identificador
de módulo Python (`admin.billing_tools`).
"""

from __future__ import annotations

import keyword
from typing import List

SEPARATOR = "/"


def _segments(name: str) -> List[str]:
    if not isinstance(name, str) or not name.strip():
        raise ValueError("component name must be a non-empty string")

    segments = name.replace("\\", SEPARATOR).strip(SEPARATOR).split(SEPARATOR)
    for segment in segments:
        if not segment.isidentifier() or keyword.iskeyword(segment):
            raise ValueError(f"invalid component name segment: {segment!r} in {name!r}")
    return segments


def module_name_for(name: str) -> str:
    """`admin/billing_tools` -> `admin.billing_tools`."""
    return ".".join(_segments(name))

