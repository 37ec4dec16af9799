"""Version label normalization and ordering.

Release lines are identified by ``major.minor`` only; the patch level is
collapsed to the wildcard ``x`` so ``2.1.3`` and ``2.1.7`` both map to the
``2.1.x`` folders of the resources tree.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Tuple

from packaging import version as pkg_version

from constants import Constants

from .errors import InvalidVersionError

_MAJOR_MINOR_PATTERN = re.compile(r"(\d+\.\d+\.)")
_NORMALIZED_PATTERN = re.compile(r"^\d+\.\d+\.x$")


def normalize(version: str) -> str:
    """Return the ``major.minor.x`` release line of a version string.

    The first ``<digits>.<digits>.`` substring wins, so pre-release and build
    suffixes are dropped: ``2.1.3-rc1`` becomes ``2.1.x``.

    Raises:
        InvalidVersionError: If no ``major.minor.`` prefix is present.
    """
    match = _MAJOR_MINOR_PATTERN.search(version or "")
    if match is None:
        raise InvalidVersionError(version)
    return match.group(1) + Constants.VERSION_WILDCARD


def is_normalized(version: str) -> bool:
    """Check whether a label is already in ``major.minor.x`` form."""
    return bool(_NORMALIZED_PATTERN.match(version or ""))


def version_key(version: str) -> Tuple[int, ...]:
    """Sort key for dotted version labels.

    Numeric components compare as integers and a trailing wildcard compares
    equal to any other trailing wildcard. Labels with more numeric components
    sort after their shorter prefixes (``2.1.0`` > ``2.1.x``).

    Raises:
        InvalidVersionError: If the label is not a dotted numeric version;
            prefixes such as ``v``, epochs and pre, post, dev or local
            segments are rejected.
    """
    text = (version or "").strip()
    wildcard_suffix = "." + Constants.VERSION_WILDCARD
    if text.endswith(wildcard_suffix):
        text = text[: -len(wildcard_suffix)]
    if not text[:1].isdigit():
        raise InvalidVersionError(version)
    try:
        parsed = pkg_version.Version(text)
    except pkg_version.InvalidVersion as exc:
        raise InvalidVersionError(version) from exc
    if (
        parsed.epoch
        or parsed.pre is not None
        or parsed.post is not None
        or parsed.dev is not None
        or parsed.local is not None
    ):
        raise InvalidVersionError(version)
    return parsed.release


def compare_versions(left: str, right: str) -> int:
    """Three-way comparison of two version labels (-1, 0 or 1)."""
    left_key = version_key(left)
    right_key = version_key(right)
    return (left_key > right_key) - (left_key < right_key)


def sort_versions(versions: Iterable[str], reverse: bool = False) -> List[str]:
    """Return the labels sorted under the release line ordering."""
    return sorted(versions, key=version_key, reverse=reverse)
