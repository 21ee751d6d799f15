# src/component_framework/core/registry/component.py
"""
Modelo de um componente.

Um componente não tem identidade além do nome: ele é totalmente
reconstruível a partir de `(base_dir, name)`. Todos os atributos derivados
são calculados sob demanda.

Layout esperado sob `<base_dir>/<name>/`:

    __init__.py                     opcional (módulo raiz, hooks `init` / `ready`)
    initialize.py                   opcional
    routes.py                       opcional
    migrations/                     opcional
    helpers/                        opcional
    assets/stylesheets/app.scss     opcional (manifest)
    assets/javascripts/app.js       opcional (manifest)
    assets/images/                  opcional
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from .naming import module_name_for

PACKAGE_FILE = "__init__.py"
INITIALIZER_FILE = "initialize.py"
ROUTES_FILE = "routes.py"
MIGRATIONS_DIR = "migrations"
HELPERS_DIR = "helpers"
STYLESHEETS_DIR = "assets/stylesheets"
JAVASCRIPTS_DIR = "assets/javascripts"
IMAGES_DIR = "assets/images"
STYLESHEET_MANIFEST = "assets/stylesheets/app.scss"
JAVASCRIPT_MANIFEST = "assets/javascripts/app.js"


@dataclass(frozen=True)
class Component:
    base_dir: Path
    name: str

    @property
    def path(self) -> Path:
        return Path(self.base_dir) / self.name

    @property
    def module_name(self) -> str:
        return module_name_for(self.name)

    @property
    def package_file(self) -> Path:
        return self.path / PACKAGE_FILE

    @property
    def initializer_path(self) -> Path:
        return self.path / INITIALIZER_FILE

    @property
    def routes_path(self) -> Path:
        return self.path / ROUTES_FILE

    @property
    def migrations_path(self) -> Path:
        return self.path / MIGRATIONS_DIR

    @property
    def helpers_path(self) -> Path:
        return self.path / HELPERS_DIR

    @property
    def stylesheets_path(self) -> Path:
        return self.path / STYLESHEETS_DIR

    @property
    def javascripts_path(self) -> Path:
        return self.path / JAVASCRIPTS_DIR

    @property
    def images_path(self) -> Path:
        return self.path / IMAGES_DIR

    @property
    def stylesheet_manifest(self) -> Path:
        return self.path / STYLESHEET_MANIFEST

    @property
    def javascript_manifest(self) -> Path:
        return self.path / JAVASCRIPT_MANIFEST

    def asset_paths(self) -> List[Path]:
        """Diretórios de assets existentes: stylesheets, javascripts, images."""
        candidates = (self.stylesheets_path, self.javascripts_path, self.images_path)
        return [p for p in candidates if p.is_dir()]

    def manifest(self, subpath: str) -> Path:
        return self.path / subpath
