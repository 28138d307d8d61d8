"""Authentication information for gdrivefetch (OAuth only)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_TOKEN_FILE = "token.json"


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    Only OAuth is supported:
        kind = "oauth"
        data must include:
            - client_secrets_file
        data may include:
            - token_file (defaults to "token.json" in the working directory)
    """

    kind: str
    data: dict[str, Any]

    def __post_init__(self) -> None:
        if self.kind != "oauth":
            raise ValueError("AuthInfo.kind must be 'oauth'")

        if not isinstance(self.data, dict):
            raise TypeError("AuthInfo.data must be a dict")

        value = self.data.get("client_secrets_file")
        if not isinstance(value, str) or not value.strip():
            raise ValueError("AuthInfo.data['client_secrets_file'] must be a non-empty string")

        token_file = self.data.get("token_file", DEFAULT_TOKEN_FILE)
        if not isinstance(token_file, str) or not token_file.strip():
            raise ValueError("AuthInfo.data['token_file'] must be a non-empty string")

    @property
    def client_secrets_file(self) -> str:
        """Path to OAuth client secrets JSON."""
        return str(self.data["client_secrets_file"])

    @property
    def token_file(self) -> str:
        """Path to OAuth token JSON (authorized user)."""
        return str(self.data.get("token_file", DEFAULT_TOKEN_FILE))
