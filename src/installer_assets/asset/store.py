"""Persist writable assets to an asset directory and read them back.

Usage:
    from installer_assets.asset.store import load_or_generate, persist_to_file

    config = Config()
    reused = load_or_generate(config, Path("install-dir"))
    if not reused:
        persist_to_file(config, Path("install-dir"))

load_or_generate() handles one asset only. It does not resolve dependencies;
callers pass an already-populated Parents when the asset needs any.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import structlog

from installer_assets.asset.base import Parents, WritableAsset
from installer_assets.asset.fetcher import DirectoryFileFetcher
from installer_assets.errors import AssetPersistError

logger = structlog.get_logger(__name__)

# Mode for written asset files (owner rw, group r)
ASSET_FILE_MODE = 0o640


def _write_atomic(path: Path, data: bytes) -> None:
    """Write data to path so readers never see a partially written file.

    The content goes to a temporary file beside path, which then replaces
    path in one rename. On failure the temporary file is removed and any
    existing file at path is left untouched.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_path, ASSET_FILE_MODE)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def persist_to_file(asset: WritableAsset, directory: Path | str) -> list[Path]:
    """Write every file of an asset under the asset directory.

    Args:
        asset: The asset whose files() are written.
        directory: Root of the asset directory. Created if missing.

    Returns:
        Paths of the written files.

    Raises:
        AssetPersistError: If a file or its parent directory cannot be written.
    """
    directory = Path(directory)
    written: list[Path] = []

    for asset_file in asset.files():
        path = directory / asset_file.filename
        try:
            _write_atomic(path, asset_file.data)
        except OSError as e:
            raise AssetPersistError(
                f"Failed to write {asset.name()} asset",
                path=str(path),
                internal_details=str(e),
            ) from e

        logger.info(
            "asset_file_written",
            asset=asset.name(),
            path=str(path),
            size=len(asset_file.data),
        )
        written.append(path)

    return written


def delete_asset_from_disk(asset: WritableAsset, directory: Path | str) -> None:
    """Remove an asset's files from the asset directory.

    Files that do not exist are ignored.

    Args:
        asset: The asset whose files() are removed.
        directory: Root of the asset directory.
    """
    directory = Path(directory)
    for asset_file in asset.files():
        path = directory / asset_file.filename
        path.unlink(missing_ok=True)
        logger.debug("asset_file_deleted", asset=asset.name(), path=str(path))


def load_or_generate(
    asset: WritableAsset,
    directory: Path | str,
    parents: Parents | None = None,
) -> bool:
    """Reuse an asset's persisted files, or generate it when they are absent.

    Args:
        asset: The asset to populate.
        directory: Root of the asset directory.
        parents: Resolved dependencies passed to generate(). Defaults to empty.

    Returns:
        True if the asset was loaded from disk, False if it was generated.

    Raises:
        OSError: If reading persisted files fails for a reason other than absence.
        InstallerAssetError: If generation fails.
    """
    log = logger.bind(asset=asset.name(), directory=str(directory))

    if asset.load(DirectoryFileFetcher(directory)):
        log.info("asset_loaded", files=len(asset.files()))
        return True

    asset.generate(parents if parents is not None else Parents())
    if asset.files():
        log.info("asset_generated", files=len(asset.files()))
    else:
        log.info("asset_skipped")
    return False
