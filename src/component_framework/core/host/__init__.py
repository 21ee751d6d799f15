"""
Colaborador aplicação host: load paths, initializers em duas fases, assets
e eager load.
"""

from .application import AssetConfig, HostApplication, Initializer
from .assets import AssetEnvironment, DirectiveProcessor, ProcessedAsset, ScssTemplate, StylesheetImporter
from .eager_load import discover_eager_load_files, in_test_directory, module_path_for

__all__ = [
    "AssetConfig",
    "HostApplication",
    "Initializer",
    "AssetEnvironment",
    "DirectiveProcessor",
    "ProcessedAsset",
    "ScssTemplate",
    "StylesheetImporter",
    "discover_eager_load_files",
    "in_test_directory",
    "module_path_for",
]
