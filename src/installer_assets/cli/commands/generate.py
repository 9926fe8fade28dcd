"""installer-assets generate command - Generate or reuse the openshift-install ConfigMap."""

from __future__ import annotations

from pathlib import Path

import click

from installer_assets.cli.errors import EXIT_SYSTEM_ERROR, EXIT_USER_ERROR, CLIError
from installer_assets.cli.output import success, warning


@click.command("generate")
@click.option(
    "-d",
    "--dir",
    "asset_dir",
    type=click.Path(file_okay=False),
    default=".",
    help="Asset directory [default: .]",
)
@click.option(
    "--invoker",
    type=str,
    default=None,
    help="Tool invoking the installer [default: $OPENSHIFT_INSTALL_INVOKER]",
)
@click.option(
    "--release-version",
    type=str,
    default=None,
    help="Installer version recorded in the ConfigMap [default: package version]",
)
def generate(asset_dir: str, invoker: str | None, release_version: str | None) -> None:
    """Generate the openshift-install ConfigMap, reusing it if already on disk.

    An existing openshift/openshift-install.yaml in the asset directory is
    kept byte-for-byte. Otherwise the ConfigMap is rendered and written.
    Nothing is written when no invoker is configured.

    Examples:

        installer-assets generate --dir install-dir --invoker hive

        OPENSHIFT_INSTALL_INVOKER=hive installer-assets generate
    """
    from installer_assets import version
    from installer_assets.asset import load_or_generate, persist_to_file
    from installer_assets.errors import AssetPersistError, ConfigMapSerializationError
    from installer_assets.openshiftinstall import CONFIG_PATH, Config, get_invoker_override

    if release_version is not None:
        if not release_version:
            raise CLIError("--release-version must not be empty")
        version.set_raw(release_version)

    config = Config(invoker_override=invoker if invoker is not None else get_invoker_override())
    directory = Path(asset_dir)

    try:
        reused = load_or_generate(config, directory)
    except ConfigMapSerializationError as e:
        raise CLIError(f"Generation failed: {e.user_message}", exit_code=EXIT_USER_ERROR) from None
    except OSError as e:
        raise CLIError(
            f"Cannot read existing assets: {e.strerror or e}",
            exit_code=EXIT_SYSTEM_ERROR,
        ) from None

    if reused:
        success(f"Reusing existing {CONFIG_PATH}")
        return

    if not config.files():
        warning("Skipped openshift-install ConfigMap: no invoker configured")
        return

    try:
        persist_to_file(config, directory)
    except AssetPersistError as e:
        raise CLIError(f"Cannot write assets: {e.user_message}", exit_code=EXIT_SYSTEM_ERROR) from None

    success(f"Generated {CONFIG_PATH}")
