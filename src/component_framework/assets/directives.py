# src/component_framework/assets/directives.py
"""
Diretiva `require_components`.

    //= require_components assets/javascripts/app.js
     *= require_components assets/stylesheets/app.css

Cada forma resolve para `<base_dir>/<componente>/<subpath>` de todos os
componentes que possuem o arquivo, em ordem de nome.
"""

from __future__ import annotations

from pathlib import Path

from ..core.host.assets import AssetEnvironment, DirectiveProcessor
from ..core.registry import ComponentRegistry
from ..core.registry.component import JAVASCRIPT_MANIFEST


class ComponentDirectiveProcessor(DirectiveProcessor):
    def __init__(
        self,
        environment: AssetEnvironment,
        filename: Path,
        content_type: str,
        *,
        registry: ComponentRegistry,
    ):
        super().__init__(environment, filename, content_type)
        self.registry = registry

    def process_require_components_directive(self, manifest_subpath: str = JAVASCRIPT_MANIFEST) -> None:
        for path in self.registry.manifest_paths(manifest_subpath):
            self._require(self.environment.resolve(str(path), base_path=self.dirname, content_type=self.content_type))
