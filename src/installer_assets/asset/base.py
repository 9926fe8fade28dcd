"""Asset contract for installer-assets.

This module defines the interface every generated asset implements:
- AssetFile: A generated file (relative path + raw bytes)
- Asset: Protocol for units with dependencies and a generate step
- WritableAsset: Asset whose output is persisted as files and reloadable
- Parents: Resolved dependencies handed to Asset.generate()

Many differently-shaped assets satisfy these protocols structurally, so an
orchestrator can hold them in one collection and drive them generically.
"""

from __future__ import annotations

from abc import abstractmethod
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from installer_assets.asset.fetcher import FileFetcher


class AssetFile(BaseModel):
    """A file generated by an asset.

    Attributes:
        filename: Path of the file relative to the asset directory.
        data: Raw file content.

    Example:
        >>> AssetFile(filename="openshift/openshift-install.yaml", data=b"kind: ConfigMap\\n")
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    filename: str = Field(
        ...,
        min_length=1,
        description="Path relative to the asset directory",
    )
    data: bytes = Field(
        ...,
        description="Raw file content",
    )

    @field_validator("filename")
    @classmethod
    def validate_relative(cls, v: str) -> str:
        """Reject absolute paths and paths escaping the asset directory.

        Args:
            v: The filename to validate.

        Returns:
            The validated filename.

        Raises:
            ValueError: If the filename is absolute or contains "..".
        """
        path = PurePosixPath(v)
        if path.is_absolute() or ".." in path.parts:
            raise ValueError("Must be a relative path inside the asset directory")
        return v


@runtime_checkable
class Asset(Protocol):
    """Protocol for a unit of generated installer output.

    Example implementation:
        >>> class Banner:
        ...     def name(self) -> str:
        ...         return "Banner"
        ...
        ...     def dependencies(self) -> list[Asset]:
        ...         return []
        ...
        ...     def generate(self, parents: Parents) -> None:
        ...         self.text = "hello"
    """

    @abstractmethod
    def name(self) -> str:
        """Return a human friendly name for the asset."""
        ...

    @abstractmethod
    def dependencies(self) -> list[Asset]:
        """Return the assets directly needed to generate this asset."""
        ...

    @abstractmethod
    def generate(self, parents: Parents) -> None:
        """Generate the asset from its resolved dependencies.

        Args:
            parents: Generated instances of the assets named by dependencies().
        """
        ...


@runtime_checkable
class WritableAsset(Asset, Protocol):
    """Protocol for an asset whose output is written to disk.

    A writable asset starts absent. It becomes present after generate()
    produces content or load() finds its files.
    """

    @abstractmethod
    def files(self) -> list[AssetFile]:
        """Return the files generated by the asset (empty when absent)."""
        ...

    @abstractmethod
    def load(self, fetcher: FileFetcher) -> bool:
        """Load already-rendered files back from disk.

        Args:
            fetcher: Source of previously persisted files.

        Returns:
            True if the asset's files were found and loaded, False if absent.

        Raises:
            Exception: Any fetch failure other than absence, unchanged.
        """
        ...


AssetT = TypeVar("AssetT", bound=Asset)


class Parents:
    """Generated dependencies of an asset, keyed by asset type.

    Example:
        >>> parents = Parents()
        >>> parents.add(install_config)
        >>> parents.get(InstallConfig) is install_config
        True
    """

    def __init__(self) -> None:
        """Initialize an empty collection."""
        self._assets: dict[type, Asset] = {}

    def add(self, *assets: Asset) -> None:
        """Store generated assets, replacing any earlier asset of the same type.

        Args:
            *assets: Generated asset instances.
        """
        for asset in assets:
            self._assets[type(asset)] = asset

    def get(self, asset_type: type[AssetT]) -> AssetT:
        """Return the generated instance of an asset type.

        Args:
            asset_type: The asset class to look up.

        Returns:
            The stored instance.

        Raises:
            KeyError: If no asset of that type was added.
        """
        try:
            return self._assets[asset_type]  # type: ignore[return-value]
        except KeyError:
            raise KeyError(f"Asset '{asset_type.__name__}' is not a resolved parent") from None

    def __contains__(self, asset_type: object) -> bool:
        return asset_type in self._assets

    def __len__(self) -> int:
        return len(self._assets)
