"""openshift-install ConfigMap asset.

Wraps create_install_config() in the WritableAsset contract so the
ConfigMap can be generated, persisted, and reused verbatim on later runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from installer_assets.asset.base import Asset, AssetFile, Parents
from installer_assets.openshiftinstall.configmap import create_install_config

if TYPE_CHECKING:
    from installer_assets.asset.fetcher import FileFetcher

logger = structlog.get_logger(__name__)

# Path of the ConfigMap relative to the asset directory
CONFIG_PATH = "openshift/openshift-install.yaml"


class Config:
    """Generates the openshift-install ConfigMap.

    The asset has no dependencies. It is absent until generate() renders a
    ConfigMap or load() finds one on disk.

    Attributes:
        file: The generated or loaded ConfigMap file, or None while absent.

    Example:
        >>> config = Config(invoker_override="my-tool")
        >>> config.generate(Parents())
        >>> [f.filename for f in config.files()]
        ['openshift/openshift-install.yaml']
    """

    def __init__(self, invoker_override: str | None = None) -> None:
        """Initialize the asset.

        Args:
            invoker_override: Invoker override resolved by the caller. None
                reads OPENSHIFT_INSTALL_INVOKER on each generate() call.
        """
        self.invoker_override = invoker_override
        self.file: AssetFile | None = None

    def name(self) -> str:
        """Return a human friendly name for the asset."""
        return "OpenShift Install"

    def dependencies(self) -> list[Asset]:
        """Return the assets directly needed to generate this asset (none)."""
        return []

    def generate(self, parents: Parents) -> None:
        """Render the ConfigMap.

        Leaves the asset unchanged when no invoker is configured.

        Args:
            parents: Resolved dependencies (unused).

        Raises:
            ConfigMapSerializationError: If the ConfigMap cannot be serialized.
        """
        content = create_install_config("", override=self.invoker_override)
        if content is None:
            logger.debug("asset_generate_skipped", asset=self.name())
            return

        self.file = AssetFile(filename=CONFIG_PATH, data=content.encode("utf-8"))

    def files(self) -> list[AssetFile]:
        """Return the generated ConfigMap file, if any."""
        if self.file is not None:
            return [self.file]
        return []

    def load(self, fetcher: FileFetcher) -> bool:
        """Load an already-rendered ConfigMap.

        Args:
            fetcher: Source of persisted asset files.

        Returns:
            True if the ConfigMap was found, False if it does not exist.

        Raises:
            OSError: Any fetch failure other than the file not existing.
        """
        try:
            asset_file = fetcher.fetch_by_name(CONFIG_PATH)
        except FileNotFoundError:
            return False

        self.file = asset_file
        return True
