# src/component_framework/core/errors.py
"""
Exceções canônicas do Component Framework.

Este módulo define a hierarquia oficial de exceções utilizadas durante a
descoberta de componentes e a resolução de settings em camadas.

Todas as exceções aqui definidas são fatais no ponto de chamada: nenhuma é
tratada com retry e todas devem abortar a inicialização da aplicação host.

Hierarquia:
    ComponentFrameworkError
    ├── ComponentNotFoundError
    └── SettingsError
        ├── SettingsFileMissing
        └── SettingsParseError
            └── InvalidSettingsRootTypeError

Limites explícitos:
    - Artefatos opcionais ausentes (initialize.py, arquivo de override,
      subpaths de um componente) não são erros
    - Não realiza fallback ou recovery
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class ComponentFrameworkError(Exception):
    """Exceção base do Component Framework."""


class ComponentNotFoundError(ComponentFrameworkError):
    """
    Exceção levantada quando um nome de componente não resolve para um
    módulo carregável.

    Encapsula qualquer falha subjacente (nome desconhecido, nome malformado,
    pacote sem `__init__.py`, erro de import) para que o chamador receba um
    único tipo estável de erro. A causa original fica disponível em
    `__cause__`.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Component {name} not found")


class SettingsError(ComponentFrameworkError):
    """Exceção base para erros de resolução de settings."""


class SettingsFileMissing(SettingsError):
    """
    Exceção levantada quando o arquivo base `<name>.yml` não existe.

    O arquivo base é obrigatório: sem ele o processo não tem settings
    efetivos. A ausência do arquivo de override não gera esta exceção.
    """

    def __init__(self, name: str, path: Union[str, Path]):
        self.name = name
        self.path = Path(path)
        super().__init__(f"Could not load configuration. No such file - {name}.yml")


class SettingsParseError(SettingsError):
    """
    Exceção levantada quando um documento de settings (base ou override)
    não pode ser expandido ou interpretado.

    Sempre identifica o arquivo ofensor e a mensagem do erro subjacente;
    exceções cruas do parser YAML ou do template nunca escapam.
    """

    def __init__(self, path: Union[str, Path], detail: str, message: Optional[str] = None):
        self.path = Path(path)
        self.detail = detail
        if message is None:
            message = (
                f"YAML syntax error occurred while parsing {self.path}. "
                "Please note that YAML must be consistently indented using spaces. "
                f"Tabs are not allowed. Error: {detail}"
            )
        super().__init__(message)


class InvalidSettingsRootTypeError(SettingsParseError):
    """
    Exceção levantada quando o documento não tem o formato
    `topKey -> envKey -> valores`.
    """

    def __init__(self, path: Union[str, Path], detail: str):
        super().__init__(path, detail, f"Invalid settings structure in {path}: {detail}")
