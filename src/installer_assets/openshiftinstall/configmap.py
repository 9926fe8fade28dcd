"""openshift-install ConfigMap rendering.

Records which tool invoked the installer and which installer version ran.
The ConfigMap is only rendered when an invoker is known.

Invoker resolution (first non-empty wins):
    1. Override (OPENSHIFT_INSTALL_INVOKER, read at call time unless passed in)
    2. Caller-supplied default
    3. None: no ConfigMap is rendered

Rendered document:
    apiVersion: v1
    kind: ConfigMap
    metadata:
      name: openshift-install
      namespace: openshift-config
    data:
      version: <installer version>
      invoker: <invoker>
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Literal

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from installer_assets import version as installer_version
from installer_assets.errors import ConfigMapSerializationError

logger = structlog.get_logger(__name__)

# Environment variable naming the tool that invoked the installer
INVOKER_ENV_VAR = "OPENSHIFT_INSTALL_INVOKER"

API_VERSION = "v1"
KIND = "ConfigMap"
CONFIGMAP_NAMESPACE = "openshift-config"
CONFIGMAP_NAME = "openshift-install"

SERIALIZATION_ERROR_MESSAGE = "failed to create install-config ConfigMap"


def get_invoker_override(environ: Mapping[str, str] | None = None) -> str:
    """Read the invoker override from the environment.

    Args:
        environ: Environment mapping. Defaults to os.environ, read now.

    Returns:
        The override value, or "" if unset.
    """
    env = os.environ if environ is None else environ
    return env.get(INVOKER_ENV_VAR, "")


def resolve_invoker(override: str, default: str) -> str | None:
    """Pick the invoker: override first, then default.

    Args:
        override: Externally supplied override (e.g. from the environment).
        default: Caller-supplied default.

    Returns:
        The first non-empty value, or None if both are empty.
    """
    if override:
        return override
    if default:
        return default
    return None


class ObjectMeta(BaseModel):
    """Kubernetes object metadata for the ConfigMap."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(default=CONFIGMAP_NAME, min_length=1)
    namespace: str = Field(default=CONFIGMAP_NAMESPACE, min_length=1)


class InstallConfigMap(BaseModel):
    """The openshift-install ConfigMap.

    Attributes:
        api_version: Kubernetes API version (serialized as apiVersion).
        kind: Always "ConfigMap".
        metadata: Fixed name and namespace.
        data: Ordered record with "version" then "invoker".

    Example:
        >>> cm = InstallConfigMap.for_invoker("my-tool", version="v1.2.3")
        >>> cm.data
        {'version': 'v1.2.3', 'invoker': 'my-tool'}
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    api_version: Literal["v1"] = Field(default=API_VERSION, alias="apiVersion")
    kind: Literal["ConfigMap"] = KIND
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    data: dict[str, str] = Field(
        ...,
        description="Installer version and invoker",
    )

    @model_validator(mode="after")
    def validate_record(self) -> InstallConfigMap:
        """Require both record fields, with a non-empty invoker.

        Raises:
            ValueError: If "version" or "invoker" is missing, or invoker is empty.
        """
        missing = [key for key in ("version", "invoker") if key not in self.data]
        if missing:
            raise ValueError(f"ConfigMap data missing keys: {', '.join(missing)}")
        if not self.data["invoker"]:
            raise ValueError("ConfigMap invoker must not be empty")
        return self

    @classmethod
    def for_invoker(cls, invoker: str, *, version: str) -> InstallConfigMap:
        """Build the ConfigMap for a resolved invoker.

        Args:
            invoker: Non-empty invoker name.
            version: Installer version.

        Returns:
            The ConfigMap.
        """
        return cls(data={"version": version, "invoker": invoker})

    def to_yaml(self) -> str:
        """Serialize to a YAML document.

        Returns:
            YAML text in block style with keys in declaration order.

        Raises:
            ConfigMapSerializationError: If the YAML dumper rejects the record.
        """
        document = self.model_dump(by_alias=True, mode="python")
        try:
            return yaml.safe_dump(
                document,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
        except yaml.YAMLError as e:
            raise ConfigMapSerializationError(
                SERIALIZATION_ERROR_MESSAGE,
                internal_details=str(e),
            ) from e


def create_install_config(
    default_invoker: str = "",
    *,
    override: str | None = None,
    version: str | None = None,
) -> str | None:
    """Render the openshift-install ConfigMap.

    Args:
        default_invoker: Invoker used when no override is set.
        override: Invoker override. None reads OPENSHIFT_INSTALL_INVOKER now.
        version: Installer version. None reads the process-wide version now.

    Returns:
        The YAML document, or None when neither override nor default is set
        (no ConfigMap should be created).

    Raises:
        ConfigMapSerializationError: If YAML serialization fails.

    Example:
        >>> create_install_config("", override="", version="v1.2.3") is None
        True
        >>> print(create_install_config("hive", override="", version="v1.2.3"))
        apiVersion: v1
        ...
    """
    if override is None:
        override = get_invoker_override()

    invoker = resolve_invoker(override, default_invoker)
    if invoker is None:
        logger.debug("install_configmap_skipped", reason="no_invoker")
        return None

    if version is None:
        version = installer_version.raw()

    configmap = InstallConfigMap.for_invoker(invoker, version=version)
    return configmap.to_yaml()
