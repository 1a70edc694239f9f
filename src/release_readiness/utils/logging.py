"""Logging helpers shared by the API clients."""


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Masks a secret for log output, keeping a few leading characters.

    Args:
        value: The secret to mask
        keep_chars: Number of leading characters left visible

    Returns:
        The masked value
    """
    if not value:
        return ""
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return value[:keep_chars] + "*" * (len(value) - keep_chars)
