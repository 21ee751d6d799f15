# src/component_framework/core/config/template.py
"""
Expansão de templates em arquivos de settings.

Arquivos `<name>.yml` passam por uma etapa de template (Jinja2) antes do
parse YAML, permitindo expressões inline avaliadas contra o ambiente do
processo:

    db:
      production:
        host: {{ env.DB_HOST }}
        pool: {{ env.get("DB_POOL", 5) }}

Variáveis indefinidas são erro (`StrictUndefined`): um valor ausente
nunca vira string vazia silenciosamente.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from jinja2 import Environment, StrictUndefined, TemplateError

from ..errors import SettingsParseError


_environment = Environment(
    undefined=StrictUndefined,
    keep_trailing_newline=True,
    autoescape=False,
)


def render_template(
    text: str,
    *,
    source: Union[str, Path],
    context: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    Expande o conteúdo bruto de um arquivo de settings.

    O contexto do template expõe `env` (variáveis de ambiente do processo)
    mais as chaves fornecidas em `context`, que têm precedência.

    Raises:
        SettingsParseError: Se o template for inválido ou referenciar
            variáveis indefinidas. A mensagem identifica `source`.
    """
    variables = {"env": dict(os.environ)}
    if context:
        variables.update(context)

    try:
        return _environment.from_string(text).render(**variables)
    except TemplateError as e:
        raise SettingsParseError(
            source,
            str(e),
            f"Template error occurred while rendering {source}. Error: {e}",
        ) from e
