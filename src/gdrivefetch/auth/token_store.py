"""Persistence of the authorized-user token between runs."""

from __future__ import annotations

import json
import logging
import os
from typing import Sequence

from gdrivefetch.errors import AuthError

logger = logging.getLogger(__name__)

_TOKEN_FILE_MODE = 0o600


class TokenStore:
    """Load and save OAuth credentials at a fixed path."""

    def __init__(self, path: str) -> None:
        if not isinstance(path, str) or not path.strip():
            raise ValueError("token path must be a non-empty string")
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def exists(self) -> bool:
        return os.path.isfile(self._path)

    def load(self, scopes: Sequence[str]):
        """
        Return stored credentials, or None when there is nothing usable.

        A missing file is the normal first-run case. An unreadable or
        malformed file is treated the same way so the caller re-authorizes.

        Returns:
            google.oauth2.credentials.Credentials | None
        """
        if not self.exists():
            return None

        try:
            from google.oauth2.credentials import Credentials
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "Google auth libraries are not available",
                details={"hint": "Install google-auth"},
                cause=exc,
            ) from exc

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                info = json.load(f)
            if not isinstance(info, dict):
                raise ValueError("token file must contain a JSON object")
            return Credentials.from_authorized_user_info(info, scopes=list(scopes))
        except (OSError, ValueError) as exc:
            logger.warning(f"Ignoring unusable token file {self._path}: {exc}")
            return None

    def save(self, creds) -> None:
        """
        Write credentials with owner-only permissions (create or truncate).

        Raises:
            AuthError: if the file cannot be written. Without a stored token
                every later run would need interactive authorization.
        """
        logger.info(f"Saving credential file to: {self._path}")
        token_dir = os.path.dirname(self._path)
        try:
            if token_dir:
                os.makedirs(token_dir, exist_ok=True)
            fd = os.open(
                self._path,
                os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
                _TOKEN_FILE_MODE,
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(creds.to_json())
        except OSError as exc:
            raise AuthError(
                "Failed to save OAuth token file",
                details={"token_file": self._path},
                cause=exc,
            ) from exc
