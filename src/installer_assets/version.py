"""Process-wide installer version.

The surrounding system sets the version once at startup with set_raw().
Until then, raw() reports the installed distribution version.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "installer-assets"

# Reported when the distribution metadata is unavailable (e.g. a source checkout)
UNBUILT_VERSION = "was not built correctly"

_raw: str | None = None


def _distribution_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return UNBUILT_VERSION


def raw() -> str:
    """Return the current installer version string.

    Returns:
        The version set via set_raw(), or the installed distribution version.
    """
    if _raw is not None:
        return _raw
    return _distribution_version()


def set_raw(value: str) -> None:
    """Set the process-wide installer version.

    Args:
        value: Version string, e.g. "v4.15.0".

    Raises:
        ValueError: If value is empty.
    """
    global _raw
    if not value:
        raise ValueError("Installer version must not be empty")
    _raw = value


def reset() -> None:
    """Forget any version set via set_raw().

    Use in tests to restore the distribution default.
    """
    global _raw
    _raw = None
