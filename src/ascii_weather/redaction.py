"""Helpers for redacting API keys from log and error text."""

from __future__ import annotations

import re

REDACTED = "[REDACTED]"

_AUTH_TOKEN_INLINE_RE = re.compile(
    r"(?i)\b(bearer)\s+[A-Za-z0-9\-._~+/]+=*",
)
_KEY_VALUE_SECRET_RE = re.compile(
    r"""(?ix)
    \b
    (
      authorization|
      token|
      secret|
      api[_-]?key|
      key
    )
    \s*[:=]\s*
    ([^\s,;&]+)
    """
)


def sanitize_text(text: str) -> str:
    """Redact sensitive content embedded in plain text.

    LocationIQ takes its key as a ``key=...`` query parameter, so request URLs
    quoted in httpx error messages are the main thing this catches.
    """
    sanitized = _AUTH_TOKEN_INLINE_RE.sub(r"\1 " + REDACTED, text)
    sanitized = _KEY_VALUE_SECRET_RE.sub(lambda m: f"{m.group(1)}={REDACTED}", sanitized)
    return sanitized
