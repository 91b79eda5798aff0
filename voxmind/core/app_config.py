"""Application configuration assembled from command-line arguments and the environment."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping, Sequence

from voxmind.constants.about import APP_NAME, APP_VERSION
from voxmind.constants.network_constants import (
    DATABASE_AUTH_ENV,
    DATABASE_URL_ENV,
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    FETCH_TIMEOUT_ENV,
    LOCAL_STORE_HOST,
    LOCAL_STORE_PORT,
)
from voxmind.constants.quiz_constants import SAMPLE_QUIZZES_PATH


class AppConfigError(Exception):
    """Raised when the application cannot be configured from its inputs."""


@dataclass(slots=True)
class AppConfig:
    """Resolved startup settings."""

    database_url: str
    auth_token: str | None = None
    fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS
    local_store_path: Path | None = None
    local_store_port: int = LOCAL_STORE_PORT
    verbose: bool = False

    @property
    def serves_local_store(self) -> bool:
        return self.local_store_path is not None


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME.lower(), description=f"{APP_NAME} quiz player")
    parser.add_argument(
        "--database-url",
        help=f"Realtime database URL (defaults to ${DATABASE_URL_ENV}).",
    )
    parser.add_argument(
        "--auth",
        help=f"Database auth token or secret (defaults to ${DATABASE_AUTH_ENV}).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help=f"Fetch timeout in seconds (defaults to ${FETCH_TIMEOUT_ENV} or {DEFAULT_FETCH_TIMEOUT_SECONDS:g}).",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--local-store",
        type=Path,
        metavar="FILE",
        help="Serve quizzes from a local JSON export instead of a remote database.",
    )
    source.add_argument(
        "--demo",
        action="store_true",
        help="Serve the bundled sample quizzes from a local store.",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=LOCAL_STORE_PORT,
        help=f"Port for the local store (default {LOCAL_STORE_PORT}).",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    return parser


def load_app_config(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Resolve configuration; command-line values win over environment variables."""
    environ = os.environ if environ is None else environ
    args = build_argument_parser().parse_args(argv)

    local_store_path: Path | None = None
    if args.demo:
        local_store_path = SAMPLE_QUIZZES_PATH
    elif args.local_store is not None:
        local_store_path = args.local_store
    if local_store_path is not None and not local_store_path.is_file():
        raise AppConfigError(f"Local store file not found: {local_store_path}")

    if local_store_path is not None:
        database_url = f"http://{LOCAL_STORE_HOST}:{args.port}"
    else:
        database_url = args.database_url or environ.get(DATABASE_URL_ENV, "")
    if not database_url:
        raise AppConfigError(
            f"No database URL configured. Pass --database-url, set ${DATABASE_URL_ENV}, or use --demo."
        )

    timeout = args.timeout
    if timeout is None:
        raw_timeout = environ.get(FETCH_TIMEOUT_ENV)
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_FETCH_TIMEOUT_SECONDS
        except ValueError as exc:
            raise AppConfigError(f"${FETCH_TIMEOUT_ENV} must be a number of seconds.") from exc
    if timeout <= 0:
        raise AppConfigError("Fetch timeout must be positive.")

    return AppConfig(
        database_url=database_url,
        auth_token=args.auth or environ.get(DATABASE_AUTH_ENV) or None,
        fetch_timeout_seconds=timeout,
        local_store_path=local_store_path,
        local_store_port=args.port,
        verbose=args.verbose,
    )
