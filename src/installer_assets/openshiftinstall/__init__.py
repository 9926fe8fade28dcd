"""openshift-install ConfigMap asset.

- Config: WritableAsset producing openshift/openshift-install.yaml
- create_install_config: Render the ConfigMap for an invoker
- InstallConfigMap: ConfigMap model
"""

from __future__ import annotations

from installer_assets.openshiftinstall.config import CONFIG_PATH, Config
from installer_assets.openshiftinstall.configmap import (
    CONFIGMAP_NAME,
    CONFIGMAP_NAMESPACE,
    INVOKER_ENV_VAR,
    InstallConfigMap,
    ObjectMeta,
    create_install_config,
    get_invoker_override,
    resolve_invoker,
)

__all__: list[str] = [
    "CONFIG_PATH",
    "CONFIGMAP_NAME",
    "CONFIGMAP_NAMESPACE",
    "INVOKER_ENV_VAR",
    "Config",
    "InstallConfigMap",
    "ObjectMeta",
    "create_install_config",
    "get_invoker_override",
    "resolve_invoker",
]
