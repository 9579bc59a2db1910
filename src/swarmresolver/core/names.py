"""TLD key helpers."""

from __future__ import annotations

DEFAULT_TLD = ""


def is_valid_tld(tld: str) -> bool:
    """
    Check whether a string is usable as a TLD key.

    The empty string is the default key; any other key must be a dot
    followed by at least one character.
    """
    return tld == DEFAULT_TLD or (tld.startswith(".") and len(tld) > 1)


def get_tld(name: str) -> str:
    """
    Return the routing key for a name.

    The key is the final ``.suffix`` of the name, matched verbatim. Names
    without a dot, or ending in one, map to the default key.

    Examples:
        >>> get_tld("swarm.eth")
        '.eth'
        >>> get_tld("hello")
        ''
    """
    _, dot, suffix = name.rpartition(".")
    if not dot or not suffix:
        return DEFAULT_TLD
    return dot + suffix
