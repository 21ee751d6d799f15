"""
Pipeline de assets dos componentes.

- **directives**: diretiva `require_components`
- **sass**: `@import "{all-components}"`
- **pipeline**: registro na aplicação host (`install`)
"""

from .directives import ComponentDirectiveProcessor
from .pipeline import component_image_assets, install
from .sass import ALL_COMPONENTS, ComponentScssImporter, ComponentScssTemplate

__all__ = [
    "ComponentDirectiveProcessor",
    "ComponentScssImporter",
    "ComponentScssTemplate",
    "ALL_COMPONENTS",
    "component_image_assets",
    "install",
]
