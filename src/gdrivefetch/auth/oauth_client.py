"""OAuth client utilities for gdrivefetch."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from gdrivefetch.errors import AuthError, ConfigError, InvalidArgumentError

from .auth_info import AuthInfo
from .client_config import ClientConfig
from .code_provider import CodeProvider, ConsoleCodeProvider
from .token_store import TokenStore

logger = logging.getLogger(__name__)

READONLY_SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/drive.readonly",)


class OAuthClient:
    """Create and manage OAuth credentials and Drive API service objects."""

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        token_store: Optional[TokenStore] = None,
        code_provider: Optional[CodeProvider] = None,
    ) -> None:
        if auth_info.kind != "oauth":
            raise InvalidArgumentError("OAuthClient requires AuthInfo(kind='oauth')")
        self._auth_info = auth_info
        self._token_store = token_store or TokenStore(auth_info.token_file)
        self._code_provider = code_provider or ConsoleCodeProvider()

    @property
    def token_store(self) -> TokenStore:
        return self._token_store

    def get_credentials(self, scopes: Sequence[str], ensure_valid: bool = True):
        """
        Return OAuth credentials for the given scopes.

        Args:
            scopes: OAuth scopes.
            ensure_valid: If True, refresh credentials when possible.

        Returns:
            google.oauth2.credentials.Credentials

        Raises:
            AuthError: on refresh/flow/persistence failures.
            ConfigError: if the client secrets file is unreadable.
            InvalidArgumentError: if scopes is invalid.
        """
        if not scopes or not all(isinstance(s, str) and s.strip() for s in scopes):
            raise InvalidArgumentError("scopes must be a non-empty sequence of strings")

        creds = self._token_store.load(scopes)

        if creds is not None:
            if not ensure_valid:
                return creds

            if not creds.valid and creds.refresh_token:
                try:
                    from google.auth.transport.requests import Request
                except Exception as exc:  # pragma: no cover
                    raise AuthError(
                        "Google auth libraries are not available",
                        details={"hint": "Install google-auth and requests"},
                        cause=exc,
                    ) from exc

                try:
                    creds.refresh(Request())
                except Exception as exc:
                    raise AuthError(
                        "Failed to refresh OAuth credentials",
                        details={"token_file": self._token_store.path},
                        cause=exc,
                    ) from exc
                self._token_store.save(creds)

            if creds.valid:
                return creds

            logger.warning(
                f"Stored token in {self._token_store.path} cannot be used; "
                "starting authorization"
            )

        creds = self._authorize(scopes)
        self._token_store.save(creds)
        return creds

    def build_drive_service(self, scopes: Sequence[str], ensure_valid: bool = True):
        """
        Build a Drive API service resource.

        Returns:
            googleapiclient.discovery.Resource
        """
        try:
            from googleapiclient.discovery import build
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                details={"hint": "Install google-api-python-client"},
                cause=exc,
            ) from exc

        creds = self.get_credentials(scopes=scopes, ensure_valid=ensure_valid)
        try:
            return build("drive", "v3", credentials=creds, cache_discovery=False)
        except Exception as exc:
            raise AuthError("Failed to build Drive service", cause=exc) from exc

    def _authorize(self, scopes: Sequence[str]):
        """Run the interactive code exchange and return fresh credentials."""
        try:
            from google_auth_oauthlib.flow import Flow
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "Google auth libraries are not available",
                details={"hint": "Install google-auth-oauthlib"},
                cause=exc,
            ) from exc

        client_secrets = self._auth_info.client_secrets_file
        config = ClientConfig.from_file(client_secrets)

        try:
            flow = Flow.from_client_config(
                config.to_flow_config(),
                scopes=list(scopes),
                redirect_uri=config.redirect_uri,
            )
            auth_url, _ = flow.authorization_url(
                access_type="offline",
                prompt="consent",
            )
        except Exception as exc:
            raise ConfigError(
                "Unable to parse client secret file to config",
                details={"client_secrets_file": client_secrets},
                cause=exc,
            ) from exc

        code = self._code_provider.get_code(auth_url)

        try:
            flow.fetch_token(code=code)
        except Exception as exc:
            raise AuthError(
                "Unable to retrieve token from web",
                details={
                    "client_secrets_file": client_secrets,
                    "token_file": self._token_store.path,
                },
                cause=exc,
            ) from exc
        return flow.credentials
