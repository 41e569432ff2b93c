"""Per-instance CSRF tokens for mutating widget requests."""

import secrets

CSRF_HEADER = "X-CSRF-Token"


def generate_csrf_token() -> str:
    """New random token, created once per widget instance."""
    return secrets.token_urlsafe(32)
