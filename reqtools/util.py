"""Helpers for cookies, header blocks, URL escaping and string handling."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from urllib.parse import quote, unquote

from reqtools.types import Header

_COOKIE_FIELDS = 7
_DOMAIN, _INCLUDE_SUBDOMAINS, _PATH, _HTTPS_ONLY, _EXPIRES, _NAME, _VALUE = range(_COOKIE_FIELDS)
_UNSIGNED = re.compile(r"\s*\+?(\d+)")
_TRAILING_WS = "\t\n\r "


@dataclass(frozen=True)
class Cookie:
    """A cookie as stored in a Netscape-format cookie jar."""

    name: str
    value: str
    domain: str = ""
    include_subdomains: bool = False
    path: str = "/"
    https_only: bool = False
    expires: datetime = datetime.fromtimestamp(0, tz=timezone.utc)


@dataclass
class ParsedHeader:
    """Header fields of the last response in a block, with its status line and reason."""

    header: Header = field(default_factory=Header)
    status_line: str = ""
    reason: str = ""


def split(to_split: str, delimiter: str) -> list[str]:
    """Split on a delimiter; a trailing delimiter yields no empty last token."""
    tokens = to_split.split(delimiter)
    if tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def _parse_unsigned(text: str) -> int:
    match = _UNSIGNED.match(text)
    if match is None:
        raise ValueError(f"invalid cookie expiry: {text!r}")
    return int(match.group(1))


def parse_cookies(raw_cookies: Iterable[str]) -> list[Cookie]:
    """Parse tab-separated cookie-jar lines into cookies."""
    cookies = []
    for line in raw_cookies:
        tokens = split(line, "\t")
        tokens.extend([""] * (_COOKIE_FIELDS - len(tokens)))
        expires = _parse_unsigned(tokens[_EXPIRES])
        cookies.append(
            Cookie(
                name=tokens[_NAME],
                value=tokens[_VALUE],
                domain=tokens[_DOMAIN],
                include_subdomains=is_true(tokens[_INCLUDE_SUBDOMAINS]),
                path=tokens[_PATH],
                https_only=is_true(tokens[_HTTPS_ONLY]),
                expires=datetime.fromtimestamp(expires, tz=timezone.utc),
            )
        )
    return cookies


def parse_header(headers: str) -> ParsedHeader:
    """Parse a raw header block; each status line starts the fields afresh."""
    result = ParsedHeader()
    for line in split(headers, "\n"):
        if line.startswith("HTTP/"):
            status_line = line.rstrip(_TRAILING_WS)
            result.status_line = status_line
            pos1 = next((i for i, ch in enumerate(status_line) if ch in "\t "), -1)
            if pos1 != -1:
                pos2 = next(
                    (i for i in range(pos1 + 1, len(status_line)) if status_line[i] in "\t "),
                    -1,
                )
                if pos2 != -1:
                    result.reason = status_line[pos2 + 1:]
            result.header = Header()
            continue
        key, colon, value = line.partition(":")
        if colon:
            result.header[key] = value.lstrip("\t ").rstrip(_TRAILING_WS)
    return result


def url_encode(s: str | bytes) -> str:
    """Percent-encode everything except unreserved characters."""
    return quote(s, safe="")


def url_decode(s: str) -> str:
    """Decode percent escapes; '+' is left as it is."""
    return unquote(s)


def secure_clear(buffer: bytearray) -> None:
    """Overwrite a mutable buffer with zeros, then empty it."""
    if not isinstance(buffer, bytearray):
        raise TypeError("secure_clear needs a bytearray")
    buffer[:] = bytes(len(buffer))
    del buffer[:]


def is_true(s: str) -> bool:
    """Return whether the string is 'true' in any letter case."""
    return s.lower() == "true"