"""Public auth exports for gdrivefetch."""

from __future__ import annotations

from .auth_info import DEFAULT_TOKEN_FILE, AuthInfo
from .client_config import ClientConfig
from .code_provider import (
    CodeProvider,
    ConsoleCodeProvider,
    StaticCodeProvider,
    extract_code,
)
from .oauth_client import READONLY_SCOPES, OAuthClient
from .token_store import TokenStore

__all__ = [
    "AuthInfo",
    "DEFAULT_TOKEN_FILE",
    "ClientConfig",
    "CodeProvider",
    "ConsoleCodeProvider",
    "StaticCodeProvider",
    "extract_code",
    "OAuthClient",
    "READONLY_SCOPES",
    "TokenStore",
]
