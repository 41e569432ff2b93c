"""Plain-text sanitisation for user-supplied comment fields.

Content is stored as plain text and escaped by the renderer. These
helpers only strip patterns that are dangerous even in plain text
contexts.
"""

import re

_SCRIPT_BLOCK = re.compile(
    r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE
)
_QUOTED_HANDLER = re.compile(r"\s*on\w+\s*=\s*[\"'][^\"']*[\"']", re.IGNORECASE)
_BARE_HANDLER = re.compile(r"\s*on\w+\s*=\s*[^\s>]*", re.IGNORECASE)
_JAVASCRIPT_URL = re.compile(r"javascript\s*:", re.IGNORECASE)
_BASE64_DATA_URL = re.compile(r"data\s*:[^,\s]*base64", re.IGNORECASE)


def sanitize_text(value: str) -> str:
    """Strip NUL bytes, script blocks, inline handlers and script URLs.

    Args:
        value: Raw user input

    Returns:
        Sanitised and trimmed text (may be empty)
    """
    value = value.replace("\0", "")
    value = _SCRIPT_BLOCK.sub("", value)
    value = _QUOTED_HANDLER.sub("", value)
    value = _BARE_HANDLER.sub("", value)
    value = _JAVASCRIPT_URL.sub("", value)
    value = _BASE64_DATA_URL.sub("", value)
    return value.strip()
