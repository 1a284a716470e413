"""
Command-line entry point for the cookie sync.

Example usages::

    # Sync once and exit.
    cookiesync

    # Keep syncing every 15 minutes.
    cookiesync --watch --interval=15
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from cookiesync.core.config import DEFAULT_ENV_FILE, AppSettings, _load_env_file
from cookiesync.core.errors import CookieSyncError
from cookiesync.core.logging import configure_logging
from cookiesync.sync import CookieSyncService

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def _positive_int(value: str) -> int:
    try:
        minutes = int(value)
    except ValueError:
        raise ValueError(f"invalid interval: {value!r}") from None
    if minutes <= 0:
        raise ValueError("interval must be a positive number of minutes")
    return minutes


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cookiesync",
        description="Sync cookies from CookieCloud into a KaraKeep cookie file.",
    )
    parser.add_argument(
        "-w",
        "--watch",
        action="store_true",
        help="Keep running and sync periodically.",
    )
    parser.add_argument(
        "--interval",
        default=None,
        metavar="MINUTES",
        help="Minutes between syncs in watch mode (default: 30).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Where to write the cookie file (default: cookies.json in the project root).",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=DEFAULT_ENV_FILE,
        help="Path to the environment file (default: .env in the project root).",
    )
    return parser


def _load_settings(args: argparse.Namespace) -> AppSettings:
    _load_env_file(args.env_file)
    settings = AppSettings()
    overrides = {}
    if args.output is not None:
        overrides["output_path"] = args.output
    if args.interval is not None:
        overrides["interval_minutes"] = args.interval
    return settings.model_copy(update=overrides) if overrides else settings


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.watch:
        args.interval = None
    elif args.interval is not None:
        try:
            args.interval = _positive_int(args.interval)
        except ValueError as exc:
            parser.error(f"argument --interval: {exc}")

    try:
        settings = _load_settings(args)
    except ValidationError as exc:
        configure_logging()
        logger.error("Settings validation failed:\n%s", exc)
        return EXIT_FAILURE

    configure_logging(settings.log_level)
    service = CookieSyncService(settings=settings)

    if args.watch:
        try:
            asyncio.run(
                service.run_periodic(interval_seconds=settings.interval_minutes * 60)
            )
        except KeyboardInterrupt:
            logger.info("Stopped periodic sync.")
        return EXIT_OK

    try:
        asyncio.run(service.run_once())
    except CookieSyncError as exc:
        logger.error("Cookie synchronization failed: %s", exc)
        return EXIT_FAILURE
    except Exception:  # pylint: disable=broad-except
        logger.exception("Cookie synchronization failed unexpectedly")
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
