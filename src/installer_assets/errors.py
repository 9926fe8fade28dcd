"""Exception hierarchy for installer-assets.

This module defines the exception classes raised while generating,
loading and persisting assets:
- InstallerAssetError: Base exception for all asset errors
- ConfigMapSerializationError: Raised when a ConfigMap cannot be rendered
- AssetPersistError: Raised when generated files cannot be written

User-facing messages are safe to display. Technical details are logged
internally via structlog and never become part of the message.

Fetch failures during Load are not wrapped: the file fetcher's own
exception propagates unchanged.
"""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class InstallerAssetError(Exception):
    """Base exception for installer-assets.

    Args:
        user_message: Safe message to display to the user.
        internal_details: Optional technical details for logging. Logged
            internally but NEVER exposed to the user.

    Example:
        >>> raise InstallerAssetError(
        ...     "Asset generation failed",
        ...     internal_details="representer rejected <object at 0x7f...>",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize InstallerAssetError with user message and optional details.

        Args:
            user_message: Safe message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "installer_asset_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class ConfigMapSerializationError(InstallerAssetError):
    """Raised when a ConfigMap record cannot be serialized to YAML.

    The underlying serializer exception is always chained as ``__cause__``.

    Example:
        >>> try:
        ...     yaml.safe_dump(record)
        ... except yaml.YAMLError as e:
        ...     raise ConfigMapSerializationError(
        ...         "failed to create install-config ConfigMap",
        ...         internal_details=str(e),
        ...     ) from e
    """

    pass


class AssetPersistError(InstallerAssetError):
    """Raised when an asset's generated files cannot be written to disk.

    Attributes:
        path: The file path that failed to be written.
    """

    def __init__(
        self,
        user_message: str,
        *,
        path: str,
        internal_details: str | None = None,
    ) -> None:
        """Initialize AssetPersistError with the failing path.

        Args:
            user_message: Safe message to display to the user.
            path: Path of the file that could not be written.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(f"{user_message} ({path})", internal_details=internal_details)
        self.path = path
