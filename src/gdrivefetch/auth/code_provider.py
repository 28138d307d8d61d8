"""Sources of OAuth authorization codes."""

from __future__ import annotations

import sys
from typing import Callable, Optional, Protocol, TextIO
from urllib.parse import parse_qs, urlsplit

from gdrivefetch.errors import AuthError


class CodeProvider(Protocol):
    def get_code(self, auth_url: str) -> str:
        """Return the authorization code obtained after visiting auth_url."""
        ...


def extract_code(text: str) -> str:
    """
    Accept either the bare code or the full redirect URL the browser landed on.

    >>> extract_code("http://localhost/?state=x&code=4/abc&scope=s")
    '4/abc'
    """
    value = text.strip()
    if value.startswith(("http://", "https://")):
        codes = parse_qs(urlsplit(value).query).get("code")
        if codes:
            return codes[0].strip()
    return value


class ConsoleCodeProvider:
    """Print the authorization URL and read the code from one line of input."""

    def __init__(
        self,
        *,
        input_func: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
    ) -> None:
        self._input = input_func
        self._out = out

    def get_code(self, auth_url: str) -> str:
        out = self._out or sys.stdout
        print(
            "Go to the following link in your browser then type the "
            f"authorization code: \n{auth_url}",
            file=out,
        )
        try:
            line = self._input("Authorization code: ")
        except (EOFError, KeyboardInterrupt) as exc:
            raise AuthError("Unable to read authorization code", cause=exc) from exc

        code = extract_code(line)
        if not code:
            raise AuthError("Empty authorization code")
        return code


class StaticCodeProvider:
    """Return a code known in advance (automation, tests)."""

    def __init__(self, code: str) -> None:
        if not isinstance(code, str) or not code.strip():
            raise ValueError("code must be a non-empty string")
        self._code = code.strip()

    def get_code(self, auth_url: str) -> str:
        return self._code
