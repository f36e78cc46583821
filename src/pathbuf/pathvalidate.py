from __future__ import annotations

from logging import getLogger
from re import sub

from pathvalidate import sanitize_filename

_LOGGER = getLogger(__name__)
_FALLBACK = "_"
_SURROGATES = r"[\ud800-\udfff]"


def sanitize(
    text: str,
    /,
    *,
    replacement_text: str = _FALLBACK,
    platform: str = "auto",
    max_len: int = 255,
) -> str:
    """Sanitize text into a single, normal path component.

    Lone surrogates (e.g. from `os.fsdecode` of undecodable bytes) cannot be
    encoded, so they are replaced before `pathvalidate` sees the text.
    """
    encodable = sub(_SURROGATES, replacement_text, text)
    sanitized = sanitize_filename(
        encodable, replacement_text=replacement_text, platform=platform, max_len=max_len
    )
    if sanitized in {"", ".", ".."}:
        # keep the tail, so the result stays within max_len
        sanitized = f"{sanitized}{replacement_text or _FALLBACK}"[-max_len:]
    if sanitized != text:
        _LOGGER.debug("Sanitized %r to %r", text, sanitized)
    return sanitized


__all__ = ["sanitize"]
