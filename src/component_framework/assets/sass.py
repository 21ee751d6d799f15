# src/component_framework/assets/sass.py
"""
Suporte a `@import "{all-components}";` em SCSS.

O importer troca esse alvo especial pelo `assets/stylesheets/app.scss` de
cada componente que o possui; qualquer outro `@import` segue o importer
padrão da aplicação host.
"""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.host.assets import AssetEnvironment, ScssTemplate, StylesheetImporter
from ..core.registry import ComponentRegistry
from ..core.registry.component import STYLESHEET_MANIFEST

ALL_COMPONENTS = "{all-components}"


class ComponentScssImporter(StylesheetImporter):
    def __init__(self, environment: Optional[AssetEnvironment] = None, *, registry: ComponentRegistry):
        super().__init__(environment)
        self.registry = registry

    def imports(self, path: str, parent_path: Path) -> List[Path]:
        if path == ALL_COMPONENTS:
            return self._import_components()
        return super().imports(path, parent_path)

    def _import_components(self) -> List[Path]:
        manifests = self.registry.manifest_paths(STYLESHEET_MANIFEST)
        for filename in manifests:
            self.depend_on(filename)
        return [filename.resolve() for filename in manifests]


class ComponentScssTemplate(ScssTemplate):
    def __init__(self, registry: ComponentRegistry):
        super().__init__()
        self.registry = registry

    def config_options(self) -> Dict[str, Any]:
        options = super().config_options()
        options["importer"] = partial(ComponentScssImporter, registry=self.registry)
        return options
