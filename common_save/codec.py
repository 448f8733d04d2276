"""
Text codec for the shared blob.

compress() turns a JSON string into compact, transport-safe text
(UTF-8 -> zlib -> base64). decompress() reverses it and maps an absent
read (None or empty) to None.
"""

from __future__ import annotations

import base64
import zlib
from typing import Optional

from common_save.errors import CodecError


def compress(text: str) -> str:
    """Compress text to base64-encoded zlib data."""
    compressed = zlib.compress(text.encode('utf-8'))
    return base64.b64encode(compressed).decode('ascii')


def decompress(data: Optional[str]) -> Optional[str]:
    """
    Decompress text produced by compress().

    Returns:
        The original text, or None when there is nothing stored

    Raises:
        CodecError: data is not valid compressed text
    """
    if not data:
        return None

    try:
        compressed = base64.b64decode(data.strip(), validate=True)
        return zlib.decompress(compressed).decode('utf-8')
    except (ValueError, zlib.error) as e:
        raise CodecError(f"Invalid common save data: {e}") from e
