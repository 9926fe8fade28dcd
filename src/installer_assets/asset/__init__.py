"""Generic asset contract for installer-assets.

This module exports the asset protocols, file fetchers and persistence helpers:
- Asset / WritableAsset: Protocols implemented by every asset
- AssetFile: A generated file
- Parents: Resolved dependencies passed to generate()
- FileFetcher: Protocol for reading persisted files
- DirectoryFileFetcher / InMemoryFileFetcher: Concrete fetchers
- persist_to_file / delete_asset_from_disk / load_or_generate: Disk helpers
"""

from __future__ import annotations

from installer_assets.asset.base import Asset, AssetFile, Parents, WritableAsset
from installer_assets.asset.fetcher import (
    DirectoryFileFetcher,
    FileFetcher,
    InMemoryFileFetcher,
)
from installer_assets.asset.store import (
    ASSET_FILE_MODE,
    delete_asset_from_disk,
    load_or_generate,
    persist_to_file,
)

__all__: list[str] = [
    # Contract
    "Asset",
    "WritableAsset",
    "AssetFile",
    "Parents",
    # Fetchers
    "FileFetcher",
    "DirectoryFileFetcher",
    "InMemoryFileFetcher",
    # Disk helpers
    "ASSET_FILE_MODE",
    "persist_to_file",
    "delete_asset_from_disk",
    "load_or_generate",
]
