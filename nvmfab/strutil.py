"""Small string helpers."""

__all__ = ["strcount", "strstarts", "strends"]


def strcount(haystack: str, needle: str) -> int:
    """Count the non-overlapping occurrences of ``needle`` in ``haystack``.

    An empty needle has no meaningful count and raises ``ValueError``.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    return haystack.count(needle)


def strstarts(string: str, prefix: str) -> bool:
    """Return True if ``string`` begins with ``prefix``."""
    return string.startswith(prefix)


def strends(string: str, postfix: str) -> bool:
    """Return True if ``string`` ends with ``postfix``."""
    return string.endswith(postfix)