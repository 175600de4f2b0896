"""Component name normalization and casing helpers.

``hyphen_to_camel`` and ``camel_to_hyphen`` are the two directions between the
operator-facing kebab-case spelling (``my-thing``) and the camel-case name used
for folders and files (``myThing``).
"""

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def hyphen_to_camel(name: str) -> str:
    """Delete each hyphen and uppercase the character that followed it.

    E.g. ``'my-thing'`` -> ``'myThing'``, ``'a-b-c'`` -> ``'aBC'``.
    """
    head, *rest = name.split("-")
    return head + "".join(capitalize_first(part) for part in rest)


def camel_to_hyphen(name: str) -> str:
    """Convert ``myThing`` to ``my-thing``.

    A hyphen is inserted between a lowercase letter or digit and a following
    uppercase letter, then the whole string is lowercased.
    """
    return _CAMEL_BOUNDARY.sub(r"\1-\2", name).lower()


def capitalize_first(value: str) -> str:
    """Uppercase only the first character (``myThing`` -> ``MyThing``)."""
    return value[:1].upper() + value[1:]


def starts_lowercase(name: str) -> bool:
    """Return ``True`` if the first character equals its lowercased form."""
    return bool(name) and name[0] == name[0].lower()


def derive_tag(namespace: str, component: str) -> str:
    """Build the kebab-case element tag, e.g. ``base-my-button``."""
    return f"{namespace}-{camel_to_hyphen(component)}"
