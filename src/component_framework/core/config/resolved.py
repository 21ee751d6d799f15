# src/component_framework/core/config/resolved.py
"""
Settings resolvidos e imutáveis.

`ResolvedSettings` é o valor devolvido por `load_settings`. Ele congela o
resultado do merge para que mutações posteriores sejam impossíveis e
normaliza todas as chaves para `str` na fronteira do modelo de dados:

    settings["db"]["host"]
    settings.db.host

são equivalentes. Mapeamentos aninhados viram `ResolvedSettings` e listas
viram tuplas.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return ResolvedSettings(value)
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, ResolvedSettings):
        return value.to_dict()
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


class ResolvedSettings(Mapping):
    """Mapeamento imutável de settings com chaves normalizadas para `str`."""

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[Any, Any]] = None):
        frozen = {str(key): _freeze(value) for key, value in (data or {}).items()}
        object.__setattr__(self, "_data", frozen)

    def __getitem__(self, key: Any) -> Any:
        return self._data[str(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return str(key) in self._data

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise TypeError("ResolvedSettings is immutable")

    def __delattr__(self, name: str) -> None:
        raise TypeError("ResolvedSettings is immutable")

    def __setitem__(self, key: Any, value: Any) -> None:
        raise TypeError("ResolvedSettings is immutable")

    def __delitem__(self, key: Any) -> None:
        raise TypeError("ResolvedSettings is immutable")

    def __reduce__(self):
        return (ResolvedSettings, (self.to_dict(),))

    def __repr__(self) -> str:
        return f"ResolvedSettings({self._data!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Cópia profunda mutável (dicts e listas puros)."""
        return {key: _thaw(value) for key, value in self._data.items()}
