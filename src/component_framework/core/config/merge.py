# src/component_framework/core/config/merge.py
"""
Utilitário canônico de deep-merge de settings.

Este módulo implementa a política de deep-merge usada para aplicar um
documento de override (`<name>.override.yml`) sobre o documento base
(`<name>.yml`), já projetados para o ambiente corrente.

Política de merge:
    - dict + dict → merge recursivo por chave
    - qualquer outro caso → o valor do override substitui o da base
    - chaves presentes apenas no override são adicionadas

Invariantes:
    - Nenhum input é mutado durante o processo
    - Chaves não sobrescritas são preservadas
    - A mesma entrada sempre produz a mesma saída

Limites explícitos:
    - Não carrega arquivos
    - Não realiza coerção de tipos
"""

from copy import deepcopy
from typing import Any, Dict, Mapping


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge entre dois mapeamentos de settings.

    O override vence em conflitos escalares e em conflitos de tipo
    (ex.: `{"db": {...}}` vs `{"db": "sqlite://"}`): o valor do override
    substitui o da base por inteiro. Apenas quando ambos os lados são
    mapeamentos o merge desce recursivamente.

    Args:
        base (Mapping[str, Any]): Settings base já projetados.
        override (Mapping[str, Any]): Settings de override já projetados.

    Returns:
        Dict[str, Any]: Novo dicionário resultante do merge.

    Raises:
        TypeError: Se algum dos argumentos não for um mapeamento.
    """

    if not isinstance(base, Mapping) or not isinstance(override, Mapping):
        raise TypeError(
            f"Deep-merge requer mapeamentos no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = {key: deepcopy(value) for key, value in base.items()}

    for key, override_value in override.items():
        base_value = result.get(key)

        # dict -> merge recursivo
        if isinstance(base_value, Mapping) and isinstance(override_value, Mapping):
            result[key] = deep_merge(base_value, override_value)
            continue

        result[key] = deepcopy(override_value)

    return result
