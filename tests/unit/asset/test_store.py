"""Unit tests for asset persistence helpers.

This module tests:
- persist_to_file() writing files with the asset file mode
- AssetPersistError on write failures, leaving any existing file intact
- delete_asset_from_disk() tolerating missing files
- load_or_generate() reusing persisted files instead of regenerating
"""

from __future__ import annotations

import stat
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from installer_assets.asset import store
from installer_assets.asset.base import Asset, AssetFile, Parents
from installer_assets.asset.fetcher import FileFetcher
from installer_assets.asset.store import (
    ASSET_FILE_MODE,
    delete_asset_from_disk,
    load_or_generate,
    persist_to_file,
)
from installer_assets.errors import AssetPersistError
from installer_assets.openshiftinstall.config import CONFIG_PATH, Config


class CountingAsset:
    """Writable asset that records how often it was generated and loaded."""

    def __init__(self) -> None:
        self.generated = 0
        self.file: AssetFile | None = None
        self.parents: Parents | None = None

    def name(self) -> str:
        return "Counting"

    def dependencies(self) -> list[Asset]:
        return []

    def generate(self, parents: Parents) -> None:
        self.generated += 1
        self.parents = parents
        self.file = AssetFile(filename="counting/out.txt", data=b"generated")

    def files(self) -> list[AssetFile]:
        return [self.file] if self.file else []

    def load(self, fetcher: FileFetcher) -> bool:
        try:
            self.file = fetcher.fetch_by_name("counting/out.txt")
        except FileNotFoundError:
            return False
        return True


@pytest.fixture
def generated_config() -> Config:
    """A Config asset with a generated ConfigMap."""
    config = Config(invoker_override="my-tool")
    config.generate(Parents())
    return config


class TestPersistToFile:
    """Tests for persist_to_file()."""

    def test_writes_files(self, generated_config: Config, tmp_path: Path) -> None:
        written = persist_to_file(generated_config, tmp_path)

        target = tmp_path / CONFIG_PATH
        assert written == [target]
        assert target.read_bytes() == generated_config.files()[0].data

    def test_file_mode(self, generated_config: Config, tmp_path: Path) -> None:
        persist_to_file(generated_config, tmp_path)
        mode = stat.S_IMODE((tmp_path / CONFIG_PATH).stat().st_mode)
        assert mode == ASSET_FILE_MODE == 0o640

    def test_creates_missing_directory(self, generated_config: Config, tmp_path: Path) -> None:
        directory = tmp_path / "nested" / "install-dir"
        persist_to_file(generated_config, str(directory))
        assert (directory / CONFIG_PATH).exists()

    def test_absent_asset_writes_nothing(self, tmp_path: Path) -> None:
        assert persist_to_file(Config(), tmp_path) == []
        assert list(tmp_path.iterdir()) == []

    def test_overwrites_existing_file(self, generated_config: Config, tmp_path: Path) -> None:
        target = tmp_path / CONFIG_PATH
        target.parent.mkdir(parents=True)
        target.write_bytes(b"stale")

        persist_to_file(generated_config, tmp_path)
        assert target.read_bytes() == generated_config.files()[0].data

    def test_write_failure_raises_persist_error(
        self, generated_config: Config, tmp_path: Path
    ) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(AssetPersistError) as exc_info:
            persist_to_file(generated_config, blocker)

        assert exc_info.value.path == str(blocker / CONFIG_PATH)
        assert "OpenShift Install" in exc_info.value.user_message
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_failed_replace_keeps_existing_file(
        self,
        generated_config: Config,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """A write interrupted before the rename leaves the old file and no temp file."""
        target = tmp_path / CONFIG_PATH
        target.parent.mkdir(parents=True)
        target.write_bytes(b"previous")

        def failing_replace(src: object, dst: object) -> None:
            raise OSError("disk full")

        monkeypatch.setattr(store.os, "replace", failing_replace)

        with pytest.raises(AssetPersistError) as exc_info:
            persist_to_file(generated_config, tmp_path)

        assert exc_info.value.path == str(target)
        assert target.read_bytes() == b"previous"
        assert sorted(p.name for p in target.parent.iterdir()) == [target.name]

    def test_no_temp_files_left_after_write(
        self, generated_config: Config, tmp_path: Path
    ) -> None:
        persist_to_file(generated_config, tmp_path)
        target = tmp_path / CONFIG_PATH
        assert sorted(p.name for p in target.parent.iterdir()) == [target.name]


class TestDeleteAssetFromDisk:
    """Tests for delete_asset_from_disk()."""

    def test_removes_files(self, generated_config: Config, tmp_path: Path) -> None:
        persist_to_file(generated_config, tmp_path)
        delete_asset_from_disk(generated_config, tmp_path)
        assert not (tmp_path / CONFIG_PATH).exists()

    def test_missing_files_ignored(self, generated_config: Config, tmp_path: Path) -> None:
        delete_asset_from_disk(generated_config, tmp_path)


class TestLoadOrGenerate:
    """Tests for load_or_generate()."""

    def test_generates_when_absent(self, tmp_path: Path) -> None:
        asset = CountingAsset()
        assert load_or_generate(asset, tmp_path) is False
        assert asset.generated == 1

    def test_passes_empty_parents_by_default(self, tmp_path: Path) -> None:
        asset = CountingAsset()
        load_or_generate(asset, tmp_path)
        assert asset.parents is not None
        assert len(asset.parents) == 0

    def test_passes_given_parents(self, tmp_path: Path) -> None:
        parents = Parents()
        asset = CountingAsset()
        load_or_generate(asset, tmp_path, parents)
        assert asset.parents is parents

    def test_reuses_persisted_files(self, tmp_path: Path) -> None:
        (tmp_path / "counting").mkdir()
        (tmp_path / "counting" / "out.txt").write_bytes(b"from a previous run")

        asset = CountingAsset()
        assert load_or_generate(asset, tmp_path) is True
        assert asset.generated == 0
        assert asset.files()[0].data == b"from a previous run"

    def test_second_run_is_byte_identical(self, tmp_path: Path) -> None:
        """A second run reuses the first run's ConfigMap even if inputs changed."""
        first = Config(invoker_override="my-tool")
        assert load_or_generate(first, tmp_path) is False
        persist_to_file(first, tmp_path)

        second = Config(invoker_override="other-tool")
        assert load_or_generate(second, tmp_path) is True
        assert second.files() == first.files()

    def test_skipped_generation_writes_nothing(self, tmp_path: Path) -> None:
        config = Config()
        assert load_or_generate(config, tmp_path) is False
        assert config.files() == []

    def test_fetch_failure_propagates(self, tmp_path: Path) -> None:
        """A ConfigMap path that is a directory is a read error, not absence."""
        (tmp_path / CONFIG_PATH).mkdir(parents=True)
        with pytest.raises(OSError):
            load_or_generate(Config(invoker_override="my-tool"), tmp_path)


class TestStoreLogging:
    """Tests for structured log events emitted by the store."""

    def test_logs_generated_and_written(self, tmp_path: Path) -> None:
        config = Config(invoker_override="my-tool")
        with capture_logs() as logs:
            load_or_generate(config, tmp_path)
            persist_to_file(config, tmp_path)

        events = [entry["event"] for entry in logs]
        assert "asset_generated" in events
        assert "asset_file_written" in events

    def test_logs_loaded(self, generated_config: Config, tmp_path: Path) -> None:
        persist_to_file(generated_config, tmp_path)
        with capture_logs() as logs:
            load_or_generate(Config(), tmp_path)

        loaded = [entry for entry in logs if entry["event"] == "asset_loaded"]
        assert loaded[0]["asset"] == "OpenShift Install"

    def test_logs_skipped(self, tmp_path: Path) -> None:
        with capture_logs() as logs:
            load_or_generate(Config(), tmp_path)
        assert "asset_skipped" in [entry["event"] for entry in logs]
