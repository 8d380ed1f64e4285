"""Column identifier sanitization for untrusted CSV headers."""

import re

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_]")
_UNDERSCORE_RUNS = re.compile(r"_+")


def sanitize_identifier(name: str) -> str:
    """Map an arbitrary header to ``[A-Za-z0-9_]*``.

    Invalid characters become ``_``, runs of ``_`` collapse to one, and a
    single leading and trailing ``_`` is removed. May return ``""``.

    >>> sanitize_identifier("User Name!")
    'User_Name'
    """
    name = _INVALID_CHARS.sub("_", name)
    name = _UNDERSCORE_RUNS.sub("_", name)
    if name.startswith("_"):
        name = name[1:]
    if name.endswith("_"):
        name = name[:-1]
    return name


def sanitize_identifiers(names: list[str]) -> list[str]:
    """Sanitize a header positionally. Collisions are kept as-is."""
    return [sanitize_identifier(name) for name in names]
