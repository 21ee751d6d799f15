# src/component_framework/assets/pipeline.py
"""
Registro dos assets dos componentes no pipeline da aplicação host.

`install` adiciona os diretórios de assets dos componentes aos load paths,
inclui as imagens dos componentes na lista de precompile e registra um
initializer que troca o `DirectiveProcessor` padrão pelo
`ComponentDirectiveProcessor` (e, com suporte a SCSS, registra o transformer
que entende `{all-components}`).
"""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Callable

from ..core.host.application import ALL_GROUPS, HostApplication
from ..core.host.assets import CSS, JAVASCRIPT, SCSS, AssetEnvironment, DirectiveProcessor
from ..core.log import InitLog
from ..core.registry import ComponentRegistry
from .directives import ComponentDirectiveProcessor
from .sass import ComponentScssTemplate

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif")

SETUP_INITIALIZER = "setup_component_assets"
SASS_INITIALIZER = "setup_sass"


def component_image_assets(base_dir: Path) -> Callable[[str, str], bool]:
    """Predicado de precompile: imagens que vivem sob `base_dir`."""
    root = Path(base_dir).resolve()

    def matches(logical_path: str, filename: str) -> bool:
        if Path(logical_path).suffix.lower() not in IMAGE_EXTENSIONS:
            return False
        return root in Path(filename).resolve().parents

    return matches


def install(application: HostApplication, registry: ComponentRegistry, log: InitLog) -> None:
    log("Register Components Assets")
    application.assets.paths.extend(registry.asset_paths())
    application.assets.precompile.append(component_image_assets(registry.base_dir))

    def configure(environment: AssetEnvironment) -> None:
        log("Register assets directive processors")
        processor = partial(ComponentDirectiveProcessor, registry=registry)
        for mime_type in (JAVASCRIPT, CSS):
            environment.unregister_preprocessor(mime_type, DirectiveProcessor)
            environment.register_preprocessor(mime_type, processor)

        if application.assets.scss_support:
            log("Add .scss `@import all-components` support")
            environment.register_transformer(SCSS, CSS, ComponentScssTemplate(registry))

    # roda depois do setup de Sass da aplicação, se houver
    application.initializer(
        SETUP_INITIALIZER,
        lambda app: app.assets.configure(configure),
        group=ALL_GROUPS,
        after=SASS_INITIALIZER,
    )
