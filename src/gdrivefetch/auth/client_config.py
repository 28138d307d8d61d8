"""OAuth client secrets ("client configuration") loading."""

from __future__ import annotations

import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from gdrivefetch.errors import ConfigError

_CLIENT_TYPES: tuple[str, ...] = ("installed", "web")
_REQUIRED_KEYS: tuple[str, ...] = ("client_id", "auth_uri", "token_uri")

# Used when the secrets file does not list any redirect URI.
DEFAULT_REDIRECT_URI = "http://localhost"


@dataclass(frozen=True)
class ClientConfig:
    """Parsed client secrets document. Immutable once loaded."""

    client_type: str
    data: Mapping[str, Any]

    @classmethod
    def from_dict(cls, payload: Any) -> "ClientConfig":
        if not isinstance(payload, dict):
            raise ConfigError("Client secrets must be a JSON object")

        for client_type in _CLIENT_TYPES:
            section = payload.get(client_type)
            if section is None:
                continue
            if not isinstance(section, dict):
                raise ConfigError(
                    f"Client secrets '{client_type}' section must be an object"
                )
            missing = [k for k in _REQUIRED_KEYS if not section.get(k)]
            if missing:
                raise ConfigError(
                    "Client secrets are missing required keys",
                    details={"client_type": client_type, "missing": missing},
                )
            return cls(client_type=client_type, data=MappingProxyType(dict(section)))

        raise ConfigError(
            "Client secrets must contain an 'installed' or 'web' section",
            details={"keys": sorted(payload)},
        )

    @classmethod
    def from_file(cls, path: str) -> "ClientConfig":
        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except OSError as exc:
            raise ConfigError(
                "Unable to read client secrets file",
                details={"client_secrets_file": path},
                cause=exc,
            ) from exc
        except ValueError as exc:
            raise ConfigError(
                "Unable to parse client secrets file",
                details={"client_secrets_file": path},
                cause=exc,
            ) from exc

        try:
            return cls.from_dict(payload)
        except ConfigError as exc:
            exc.details.setdefault("client_secrets_file", path)
            raise

    @property
    def client_id(self) -> str:
        return str(self.data["client_id"])

    @property
    def redirect_uri(self) -> str:
        uris = self.data.get("redirect_uris") or []
        if isinstance(uris, list) and uris and isinstance(uris[0], str):
            return uris[0]
        return DEFAULT_REDIRECT_URI

    def to_flow_config(self) -> dict[str, Any]:
        """Return the document in the shape google_auth_oauthlib expects."""
        return {self.client_type: dict(self.data)}
