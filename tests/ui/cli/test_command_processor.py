"""Tests for CLI command dispatch and exit codes."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from pytest_mock import MockerFixture

from settingpath.ui.cli import CommandProcessor, main


@pytest.fixture
def quiet_setup(mocker: MockerFixture) -> None:
    """Keep argument processing away from the real logger and config file."""

    _ = mocker.patch("settingpath.ui.cli.args.parser.Config")
    _ = mocker.patch("settingpath.ui.cli.args.parser.setup_logger")


@pytest.fixture
def snapshot_path(tmp_path: Path, auto_import_dialog: dict[str, Any]) -> Path:
    path = tmp_path / "settings.json"
    _ = path.write_text(json.dumps({"root": auto_import_dialog}), encoding="utf-8")
    return path


def test_resolve_prints_path(
    quiet_setup: None,
    snapshot_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _ = quiet_setup

    CommandProcessor.process_command(["resolve", str(snapshot_path), "--target", "label", "--no-copy"])

    assert "Settings | Editor | Auto Import | Insert imports on paste: Ask" in capsys.readouterr().out


def test_unresolvable_target_exits_with_error(quiet_setup: None, tmp_path: Path) -> None:
    _ = quiet_setup
    path = tmp_path / "bare.json"
    _ = path.write_text(json.dumps({"root": {"id": "root", "role": "panel"}}), encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["resolve", str(path), "--target", "root", "--no-copy"])

    assert exc_info.value.code == 1


def test_unexpected_errors_exit_with_error(
    quiet_setup: None,
    snapshot_path: Path,
    mocker: MockerFixture,
) -> None:
    _ = quiet_setup
    mock_logger = mocker.patch("settingpath.ui.cli.cli.logger")

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["resolve", str(snapshot_path), "--target", "missing", "--no-copy"])

    assert exc_info.value.code == 1
    mock_logger.error.assert_called_once()


def test_keyboard_interrupt_exits_130(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "settingpath.ui.cli.cli.ArgumentParser.process_args",
        side_effect=KeyboardInterrupt,
    )

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["separators"])

    assert exc_info.value.code == 130


def test_main_returns_zero_on_success(
    quiet_setup: None,
    mocker: MockerFixture,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _ = quiet_setup
    _ = mocker.patch("sys.argv", ["settingpath", "separators"])

    assert main() == 0
    assert "Separator styles" in capsys.readouterr().out
