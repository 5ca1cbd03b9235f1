"""Domain policies package."""

from .profiles import filter_by_profile, is_valid_profile_name, matches_profile

__all__ = ["filter_by_profile", "is_valid_profile_name", "matches_profile"]
