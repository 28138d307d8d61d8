"""Run configuration for gdrivefetch."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from gdrivefetch.auth import DEFAULT_TOKEN_FILE, READONLY_SCOPES, AuthInfo
from gdrivefetch.controller.drive_controller import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from gdrivefetch.errors import ConfigError

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class SyncConfig:
    """Everything one run needs. Built by the CLI from its arguments."""

    folder_name: str
    target_dir: str
    client_secrets_file: str
    token_file: str = DEFAULT_TOKEN_FILE
    page_size: int = DEFAULT_PAGE_SIZE
    all_pages: bool = False
    max_retries: int = 0
    log_level: str = "INFO"
    scopes: tuple[str, ...] = field(default=READONLY_SCOPES)

    def __post_init__(self) -> None:
        for name in ("folder_name", "target_dir", "client_secrets_file", "token_file"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"{name} must be a non-empty string")

        if not isinstance(self.page_size, int) or not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ConfigError(
                f"page_size must be between 1 and {MAX_PAGE_SIZE}",
                details={"page_size": self.page_size},
            )
        if not isinstance(self.max_retries, int) or self.max_retries < 0:
            raise ConfigError(
                "max_retries must be a non-negative integer",
                details={"max_retries": self.max_retries},
            )
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                "Unknown log level",
                details={"log_level": self.log_level, "choices": list(LOG_LEVELS)},
            )
        if not self.scopes:
            raise ConfigError("scopes must not be empty")

    @property
    def auth_info(self) -> AuthInfo:
        return AuthInfo(
            kind="oauth",
            data={
                "client_secrets_file": self.client_secrets_file,
                "token_file": self.token_file,
            },
        )

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level.upper())
