"""Turn raw answers into a validated :class:`ComponentSpec`."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from .errors import (
    EmptyComponentName,
    InvalidComponentName,
    InvalidNameCase,
    NameCollision,
    UnknownNamespace,
)
from .models import ComponentSpec, LanguageVariant
from .naming import hyphen_to_camel, starts_lowercase

# Letters, digits and hyphens only; the first character is a lowercase letter.
_COMPONENT_NAME = re.compile(r"[a-z][A-Za-z0-9-]*")


def build_spec(
    answers: Mapping[str, Any],
    namespaces: Sequence[str],
    language_variant: LanguageVariant,
    modules_dir: str | Path,
) -> ComponentSpec:
    """Validate and normalize the answer set.

    Checks run in this order: namespace membership, empty name, leading
    case of the raw name, leading lowercase letter, allowed characters,
    then (after hyphen normalization) collision with an existing directory.
    Nothing is written to disk.

    Raises:
        UnknownNamespace, EmptyComponentName, InvalidNameCase,
        InvalidComponentName, NameCollision
    """
    namespace = answers.get("namespace") or namespaces[0]
    if namespace not in namespaces:
        raise UnknownNamespace(namespace, list(namespaces))

    raw_name = answers.get("component") or ""
    if raw_name == "":
        raise EmptyComponentName()
    if not starts_lowercase(raw_name):
        raise InvalidNameCase(raw_name)

    # "-foo" and "1abc" pass the check above but cannot start a class name
    if not ("a" <= raw_name[0] <= "z"):
        raise InvalidNameCase(raw_name)
    if not _COMPONENT_NAME.fullmatch(raw_name):
        raise InvalidComponentName(raw_name)

    normalized = hyphen_to_camel(raw_name) if "-" in raw_name else raw_name

    target = Path(modules_dir) / namespace / normalized
    if target.exists():
        raise NameCollision(target)

    return ComponentSpec(
        namespace=namespace,
        raw_name=raw_name,
        normalized_name=normalized,
        include_css=bool(answers.get("css", True)),
        include_unit_test=bool(answers.get("unit", False)),
        include_wdio_test=bool(answers.get("wdio", False)),
        language_variant=language_variant,
    )
