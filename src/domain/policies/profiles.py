"""Profile filtering policy."""

from collections.abc import Iterable
from typing import Protocol, TypeVar

from src.domain.constants import ALL_PROFILES


class _HasProfile(Protocol):
    profile: str


T = TypeVar("T", bound=_HasProfile)


def matches_profile(item: _HasProfile, profile_filter: str | None) -> bool:
    """Return True when the item belongs to the selected profile.

    Args:
        item: Record carrying a ``profile`` key.
        profile_filter: Profile name, ``ALL_PROFILES`` or None for all.

    Returns:
        bool: True when the item should be kept.
    """
    if profile_filter is None or profile_filter == ALL_PROFILES:
        return True
    return item.profile == profile_filter


def filter_by_profile(
    items: Iterable[T],
    profile_filter: str | None,
) -> list[T]:
    """Return the items that belong to the selected profile."""
    return [item for item in items if matches_profile(item, profile_filter)]


def is_valid_profile_name(name: str) -> bool:
    """Return True when the name can be used for a new profile.

    The sentinel used for "every profile" is reserved.
    """
    candidate = name.strip()
    if not candidate:
        return False
    return candidate.lower() != ALL_PROFILES
