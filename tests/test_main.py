"""Tests for the command-line entry point."""

from __future__ import annotations

try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

import logging
from pathlib import Path

import pytest

from cookiesync import main as cli
from cookiesync.core.logging import configure_logging

ENV_KEYS = ["COOKIECLOUD_HOST", "COOKIECLOUD_UUID", "COOKIECLOUD_PASSWORD"]


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)


class FakeSyncService:
    instances: list["FakeSyncService"] = []

    def __init__(self, *, settings) -> None:
        self.settings = settings
        self.calls: list[tuple] = []
        FakeSyncService.instances.append(self)

    async def run_once(self):
        self.calls.append(("once",))

    async def run_periodic(self, *, interval_seconds: float, max_runs=None):
        self.calls.append(("periodic", interval_seconds))


@pytest.fixture
def fake_service(monkeypatch: pytest.MonkeyPatch):
    FakeSyncService.instances = []
    monkeypatch.setattr(cli, "CookieSyncService", FakeSyncService)
    return FakeSyncService


def test_main_exits_with_failure_when_config_missing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _clear_env(monkeypatch)
    output = tmp_path / "cookies.json"

    exit_code = cli.main(
        ["--env-file", str(tmp_path / "missing.env"), "--output", str(output)]
    )

    assert exit_code == cli.EXIT_FAILURE
    assert not output.exists()


def test_main_exits_with_failure_on_invalid_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("COOKIE_SYNC_INTERVAL_MINUTES", "often")

    exit_code = cli.main(["--env-file", str(tmp_path / "missing.env")])

    assert exit_code == cli.EXIT_FAILURE


def test_single_run_reads_env_file_and_output_override(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, fake_service
) -> None:
    _clear_env(monkeypatch)
    env_file = tmp_path / ".env"
    env_file.write_text(
        "COOKIECLOUD_HOST=https://cloud.example\n"
        "COOKIECLOUD_UUID=abc\n"
        "COOKIECLOUD_PASSWORD=pw\n",
        encoding="utf-8",
    )
    output = tmp_path / "out.json"

    exit_code = cli.main(["--env-file", str(env_file), "--output", str(output)])

    assert exit_code == cli.EXIT_OK
    (service,) = fake_service.instances
    assert service.calls == [("once",)]
    assert service.settings.output_path == output
    assert service.settings.cookie_cloud.uuid == "abc"


@pytest.mark.parametrize(
    "argv, expected_seconds",
    [
        (["--watch"], 30 * 60),
        (["-w", "--interval=5"], 5 * 60),
        (["--watch", "--interval", "90"], 90 * 60),
    ],
)
def test_watch_mode_uses_interval_minutes(
    tmp_path: Path, fake_service, argv: list[str], expected_seconds: int
) -> None:
    exit_code = cli.main(argv + ["--env-file", str(tmp_path / "missing.env")])

    assert exit_code == cli.EXIT_OK
    (service,) = fake_service.instances
    assert service.calls == [("periodic", expected_seconds)]


@pytest.mark.parametrize("interval", ["0", "-3", "ten"])
def test_invalid_interval_is_rejected(interval: str) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--watch", f"--interval={interval}"])

    assert excinfo.value.code == 2


def test_configure_logging_splits_stdout_and_stderr(
    capsys: pytest.CaptureFixture[str],
) -> None:
    configure_logging("INFO")
    logger = logging.getLogger("cookiesync.test")

    logger.info("progress line")
    logger.error("failure line")

    captured = capsys.readouterr()
    assert "progress line" in captured.out
    assert "failure line" not in captured.out
    assert "failure line" in captured.err


@pytest.mark.parametrize("interval", ["0", "ten"])
def test_interval_is_ignored_without_watch(
    tmp_path: Path, fake_service, interval: str
) -> None:
    exit_code = cli.main(
        [f"--interval={interval}", "--env-file", str(tmp_path / "missing.env")]
    )

    assert exit_code == cli.EXIT_OK
    (service,) = fake_service.instances
    assert service.calls == [("once",)]
    assert service.settings.interval_minutes == 30
