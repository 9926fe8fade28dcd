"""File fetchers used by WritableAsset.load().

A fetcher returns previously persisted asset files. Absence is reported
by raising FileNotFoundError so that load() can treat it as a normal
outcome; every other exception is a real failure.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from fnmatch import fnmatchcase
from pathlib import Path, PurePosixPath
from typing import Protocol, runtime_checkable

import structlog

from installer_assets.asset.base import AssetFile

logger = structlog.get_logger(__name__)


def _matches_glob(name: str, pattern: str) -> bool:
    """Match a relative filename against a glob one path segment at a time.

    Mirrors Path.glob(): "*" never crosses a "/".
    """
    name_parts = PurePosixPath(name).parts
    pattern_parts = PurePosixPath(pattern).parts
    if len(name_parts) != len(pattern_parts):
        return False
    return all(fnmatchcase(part, glob) for part, glob in zip(name_parts, pattern_parts))


@runtime_checkable
class FileFetcher(Protocol):
    """Protocol for reading persisted asset files."""

    @abstractmethod
    def fetch_by_name(self, name: str) -> AssetFile:
        """Fetch a single file by its path relative to the asset directory.

        Args:
            name: Relative file path.

        Returns:
            The file with its raw content.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        ...

    @abstractmethod
    def fetch_by_pattern(self, pattern: str) -> list[AssetFile]:
        """Fetch every file matching a glob pattern.

        Args:
            pattern: Glob relative to the asset directory (e.g. "openshift/*.yaml").

        Returns:
            Matching files sorted by filename. Empty if nothing matches.
        """
        ...


class DirectoryFileFetcher:
    """Fetch asset files from an asset directory on disk.

    Content is returned byte-for-byte as stored.

    Attributes:
        directory: Root of the asset directory.

    Example:
        >>> fetcher = DirectoryFileFetcher(Path("install-dir"))
        >>> fetcher.fetch_by_name("openshift/openshift-install.yaml").data[:11]
        b'apiVersion:'
    """

    def __init__(self, directory: Path | str) -> None:
        """Initialize the fetcher.

        Args:
            directory: Root of the asset directory.
        """
        self.directory = Path(directory)

    def fetch_by_name(self, name: str) -> AssetFile:
        """Read a file relative to the asset directory.

        Raises:
            FileNotFoundError: If the file does not exist.
            OSError: If the file exists but cannot be read.
        """
        path = self.directory / name
        data = path.read_bytes()
        logger.debug("asset_file_fetched", path=str(path), size=len(data))
        return AssetFile(filename=name, data=data)

    def fetch_by_pattern(self, pattern: str) -> list[AssetFile]:
        """Read every regular file matching a glob relative to the asset directory."""
        matches = sorted(p for p in self.directory.glob(pattern) if p.is_file())
        return [
            AssetFile(
                filename=path.relative_to(self.directory).as_posix(),
                data=path.read_bytes(),
            )
            for path in matches
        ]


class InMemoryFileFetcher:
    """Fetch asset files from an in-memory mapping of filename to content.

    Example:
        >>> fetcher = InMemoryFileFetcher({"openshift/openshift-install.yaml": b"..."})
    """

    def __init__(self, files: Mapping[str, bytes] | None = None) -> None:
        """Initialize the fetcher.

        Args:
            files: Mapping of relative filename to raw content.
        """
        self._files: dict[str, bytes] = dict(files or {})

    def fetch_by_name(self, name: str) -> AssetFile:
        """Return the stored file.

        Raises:
            FileNotFoundError: If no file with that name is stored.
        """
        if name not in self._files:
            raise FileNotFoundError(f"Asset file not found: {name}")
        return AssetFile(filename=name, data=self._files[name])

    def fetch_by_pattern(self, pattern: str) -> list[AssetFile]:
        """Return stored files whose names match the glob pattern."""
        return [
            AssetFile(filename=name, data=self._files[name])
            for name in sorted(self._files)
            if _matches_glob(name, pattern)
        ]
