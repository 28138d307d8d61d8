"""Command-line entry point: gdrivefetch SRC_DIR TARGET_DIR CRED_FILE."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from gdrivefetch.auth import DEFAULT_TOKEN_FILE
from gdrivefetch.auth.code_provider import CodeProvider
from gdrivefetch.config import LOG_LEVELS, SyncConfig
from gdrivefetch.controller import DEFAULT_PAGE_SIZE
from gdrivefetch.errors import GDriveFetchError
from gdrivefetch.log import setup_logging
from gdrivefetch.manager import FolderSyncer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gdrivefetch",
        description=(
            "Download the files of a named Google Drive folder that are not "
            "present in TARGET_DIR yet, keeping their modification times."
        ),
    )
    parser.add_argument("src_dir", metavar="SRC_DIR", help="Name of the Drive folder")
    parser.add_argument("target_dir", metavar="TARGET_DIR", help="Local directory to sync into")
    parser.add_argument("cred_file", metavar="CRED_FILE", help="OAuth client secrets JSON")
    parser.add_argument(
        "--token-file",
        default=DEFAULT_TOKEN_FILE,
        help="Where the OAuth token is kept (default: %(default)s)",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=DEFAULT_PAGE_SIZE,
        help="Entries requested per listing page (default: %(default)s)",
    )
    parser.add_argument(
        "--all-pages",
        action="store_true",
        help="Follow listing pages instead of stopping after the first one",
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=0,
        help="Retries for rate-limited, network and 5xx errors (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: %(default)s)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> SyncConfig:
    return SyncConfig(
        folder_name=args.src_dir,
        target_dir=args.target_dir,
        client_secrets_file=args.cred_file,
        token_file=args.token_file,
        page_size=args.page_size,
        all_pages=args.all_pages,
        max_retries=args.retries,
        log_level=args.log_level,
    )


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    code_provider: Optional[CodeProvider] = None,
) -> int:
    """
    Run one sync and return the process exit status.

    0 when the run completed (individual files may still have failed),
    1 on a fatal error, 2 on bad arguments (raised by argparse).
    """
    args = build_parser().parse_args(argv)

    try:
        config = config_from_args(args)
    except GDriveFetchError as exc:
        setup_logging()
        logger.error(f"Invalid arguments: {exc}")
        return 2

    setup_logging(config.log_level_value)
    logger.info(f"Arguments: {config.folder_name} {config.target_dir} {config.client_secrets_file}")

    try:
        syncer = FolderSyncer.from_config(config, code_provider=code_provider)
        result = syncer.run(config.folder_name, config.target_dir)
    except GDriveFetchError as exc:
        details = f" {exc.details}" if exc.details else ""
        logger.error(f"{exc}{details}")
        return 1

    for failed in result.failed:
        logger.error(f"Not synced: {failed.name} ({failed.status.value}: {failed.error_message})")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
