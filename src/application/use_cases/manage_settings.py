"""Use cases for profiles, categories and budgets settings."""

from src.application.ports.finance_store import FinanceStorePort
from src.domain.models import Category, Profile
from src.domain.policies import is_valid_profile_name
from src.infrastructure.logging.logger import get_app_logger


class AddProfileUseCase:
    """Create a profile with a unique, non-reserved name."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, name: str, color: str = "#3b82f6") -> Profile:
        """Create the profile.

        Raises:
            ValueError: If the name is empty, reserved or already used.
        """
        cleaned = name.strip()
        if not is_valid_profile_name(cleaned):
            raise ValueError(f"Invalid profile name: {name!r}")
        existing = {profile.name.lower() for profile in self._store.list_profiles()}
        if cleaned.lower() in existing:
            raise ValueError(f"Profile already exists: {cleaned}")
        profile = self._store.add(Profile(id="", name=cleaned, color=color))
        self._logger.info(f"Created profile {cleaned!r}")
        return profile


class AddCategoryUseCase:
    """Create a category of a known kind with a unique name."""

    _KINDS = ("income", "expense", "transfer")

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, name: str, kind: str, color: str = "#6366f1") -> Category:
        """Create the category.

        Raises:
            ValueError: If the name is empty or used, or the kind unknown.
        """
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Category name cannot be empty")
        if kind not in self._KINDS:
            raise ValueError(f"Unknown category kind: {kind!r}")
        existing = {c.name.lower() for c in self._store.list_categories()}
        if cleaned.lower() in existing:
            raise ValueError(f"Category already exists: {cleaned}")
        category = self._store.add(
            Category(id="", name=cleaned, kind=kind, color=color)
        )
        self._logger.info(f"Created {kind} category {cleaned!r}")
        return category


__all__ = ["AddProfileUseCase", "AddCategoryUseCase"]
