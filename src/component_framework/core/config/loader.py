# src/component_framework/core/config/loader.py
"""
Loader canônico de settings em camadas.

Este módulo resolve os settings efetivos de um nome lógico (ex.: `"payments"`)
para um ambiente (ex.: `"production"`) a partir de:
    - `<config_dir>/<name>.yml`          (obrigatório)
    - `<config_dir>/<name>.override.yml` (opcional)

Formato dos documentos:

    topKey:
      envKey:
        ...valores...

Pipeline de resolução:
    1. localizar o arquivo base (ausente → `SettingsFileMissing`)
    2. expandir o template (Jinja2) e interpretar como YAML
    3. projetar cada `topKey` no ambiente pedido (ausente → `{}`)
    4. repetir 2-3 para o override, se existir, e aplicar deep-merge
    5. congelar o resultado em `ResolvedSettings`

Invariantes:
    - Uma `topKey` presente nunca resolve para `None`
    - Erros de parse sempre identificam o arquivo ofensor
    - A ausência do override nunca é erro
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml  # PyYAML

from ..errors import InvalidSettingsRootTypeError, SettingsFileMissing, SettingsParseError
from ..options import default_env
from .merge import deep_merge
from .resolved import ResolvedSettings
from .template import render_template

logger = logging.getLogger(__name__)

SETTINGS_SUFFIX = ".yml"
OVERRIDE_SUFFIX = ".override"
DEFAULT_CONFIG_DIR = "config"


def project_environment(document: Mapping[Any, Any], env: str, *, source: Union[str, Path]) -> Dict[str, Any]:
    """
    Projeta um documento `topKey -> envKey -> valores` em `topKey -> valores`.

    Ambientes ausentes, nulos ou `false` resolvem para um mapeamento vazio. Uma
    `topKey` sem corpo (`cache:`) também resolve para `{}`.

    Raises:
        InvalidSettingsRootTypeError: Se o valor de uma `topKey` não for um
            mapeamento de ambientes.
    """
    projected: Dict[str, Any] = {}
    for key, per_env in document.items():
        if per_env is None:
            projected[str(key)] = {}
            continue

        if not isinstance(per_env, Mapping):
            raise InvalidSettingsRootTypeError(
                source,
                f"key '{key}' must map environments to values, got {type(per_env).__name__}",
            )

        environments = {str(k): v for k, v in per_env.items()}
        value = environments.get(env)
        projected[str(key)] = {} if value is None or value is False else value

    return projected


def _load_settings_file(
    path: Path,
    env: str,
    context: Optional[Mapping[str, Any]] = None,
) -> Optional[Dict[str, Any]]:
    """
    Carrega, expande e projeta um único arquivo de settings.

    Returns:
        Optional[Dict[str, Any]]: Documento projetado, ou `None` quando o
        arquivo não existe.

    Raises:
        SettingsParseError: Template inválido ou YAML malformado.
        InvalidSettingsRootTypeError: Raiz do documento não é um mapeamento.
    """
    if not path.is_file():
        return None

    processed = render_template(path.read_text(encoding="utf-8"), source=path, context=context)

    try:
        document = yaml.safe_load(processed)
    except yaml.YAMLError as e:
        raise SettingsParseError(path, str(e)) from e

    if document is None:
        document = {}

    if not isinstance(document, Mapping):
        raise InvalidSettingsRootTypeError(
            path, f"root must be a mapping, got {type(document).__name__}"
        )

    return project_environment(document, env, source=path)


def load_settings(
    name: str,
    env: Optional[str] = None,
    *,
    config_dir: Optional[Union[str, os.PathLike]] = None,
    context: Optional[Mapping[str, Any]] = None,
) -> ResolvedSettings:
    """
    Carrega `<name>.yml` e aplica `<name>.override.yml` por cima, se existir.

    Args:
        name (str): Nome lógico do arquivo de settings (sem extensão).
        env (Optional[str]): Ambiente a projetar. Padrão: `default_env()`.
        config_dir: Diretório de configuração. Padrão: `./config`.
        context: Variáveis extras para a etapa de template.

    Returns:
        ResolvedSettings: Settings efetivos, imutáveis.

    Raises:
        SettingsFileMissing: Se `<name>.yml` não existir.
        SettingsParseError: Se qualquer um dos arquivos estiver malformado.
    """
    env = env or default_env()
    directory = Path(config_dir) if config_dir is not None else Path(DEFAULT_CONFIG_DIR)

    base_path = directory / f"{name}{SETTINGS_SUFFIX}"
    settings = _load_settings_file(base_path, env, context)
    if settings is None:
        raise SettingsFileMissing(name, base_path)

    override_path = directory / f"{name}{OVERRIDE_SUFFIX}{SETTINGS_SUFFIX}"
    overrides = _load_settings_file(override_path, env, context)
    if overrides:
        logger.debug("Applying settings override %s (env=%s)", override_path, env)
        settings = deep_merge(settings, overrides)

    return ResolvedSettings(settings)
