"""installer-assets show command - Print the persisted openshift-install ConfigMap."""

from __future__ import annotations

from pathlib import Path

import click

from installer_assets.cli.errors import EXIT_SYSTEM_ERROR, CLIError
from installer_assets.cli.output import print_yaml


@click.command("show")
@click.option(
    "-d",
    "--dir",
    "asset_dir",
    type=click.Path(file_okay=False),
    default=".",
    help="Asset directory [default: .]",
)
def show(asset_dir: str) -> None:
    """Print the openshift-install ConfigMap from the asset directory.

    Examples:

        installer-assets show --dir install-dir
    """
    from installer_assets.asset import DirectoryFileFetcher
    from installer_assets.openshiftinstall import CONFIG_PATH, Config

    config = Config()
    try:
        found = config.load(DirectoryFileFetcher(Path(asset_dir)))
    except OSError as e:
        raise CLIError(f"Cannot read {CONFIG_PATH}: {e.strerror or e}", exit_code=EXIT_SYSTEM_ERROR) from None

    if not found:
        raise CLIError(
            f"{CONFIG_PATH} not found\n\nRun 'installer-assets generate' first.",
            exit_code=EXIT_SYSTEM_ERROR,
        )

    data = config.files()[0].data
    try:
        document = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CLIError(
            f"Cannot display {CONFIG_PATH}: not valid UTF-8 (byte {e.start})",
            exit_code=EXIT_SYSTEM_ERROR,
        ) from None

    print_yaml(document)
