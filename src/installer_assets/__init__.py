"""installer-assets: Generated installer assets.

This package provides:
- Asset / WritableAsset: Contract for generate-or-load installer assets
- FileFetcher: Reading persisted asset files back from an asset directory
- openshiftinstall.Config: The openshift-install ConfigMap asset
"""

from __future__ import annotations

__version__ = "0.1.0"

from installer_assets.asset import (
    Asset,
    AssetFile,
    DirectoryFileFetcher,
    FileFetcher,
    InMemoryFileFetcher,
    Parents,
    WritableAsset,
    delete_asset_from_disk,
    load_or_generate,
    persist_to_file,
)
from installer_assets.errors import (
    AssetPersistError,
    ConfigMapSerializationError,
    InstallerAssetError,
)
from installer_assets.openshiftinstall import Config, create_install_config

__all__ = [
    "__version__",
    # Asset contract
    "Asset",
    "WritableAsset",
    "AssetFile",
    "Parents",
    "FileFetcher",
    "DirectoryFileFetcher",
    "InMemoryFileFetcher",
    "persist_to_file",
    "delete_asset_from_disk",
    "load_or_generate",
    # Errors
    "InstallerAssetError",
    "ConfigMapSerializationError",
    "AssetPersistError",
    # openshift-install
    "Config",
    "create_install_config",
]
