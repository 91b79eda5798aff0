"""Application entry point for VoxMind."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from voxmind.core.app_config import AppConfig, AppConfigError, load_app_config
from voxmind.core.services.quiz_repository import QuizRepository
from voxmind.server.local_store import LocalStoreError, start_local_store
from voxmind.ui.quiz_list_window import QuizListWindow
from voxmind.utils.logging_config import configure_logging


def _build_repository(config: AppConfig) -> QuizRepository:
    return QuizRepository(
        database_url=config.database_url,
        auth_token=config.auth_token,
        timeout_seconds=config.fetch_timeout_seconds,
    )


def main(argv: list[str] | None = None) -> int:
    """Resolve configuration, optionally start the local store, and launch the Qt UI."""
    try:
        config = load_app_config(argv)
    except AppConfigError as exc:
        print(f"voxmind: {exc}", file=sys.stderr)
        return 2

    logger = configure_logging(config.verbose)
    logger.info("Starting VoxMind…")

    if config.serves_local_store:
        try:
            start_local_store(config.local_store_path, port=config.local_store_port)
        except LocalStoreError as exc:
            logger.error("%s", exc)
            return 1

    repository = _build_repository(config)
    app = QApplication(sys.argv[:1])
    window = QuizListWindow(repository)
    window.show()
    try:
        return app.exec()
    finally:
        repository.close()


if __name__ == "__main__":
    sys.exit(main())
