"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
import os

import dotenv

from src.domain.constants import (
    ALL_PROFILES,
    DEFAULT_CURRENCY,
    DEFAULT_LARGE_TRANSACTION_THRESHOLD,
)
from src.domain.errors import DataIntegrityError
from src.domain.models import AppSettings
from src.domain.services.normalization import normalize_currency_code
from src.infrastructure.logging.logger import get_app_logger

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class FinanceSettings:
    """Runtime settings for the dashboard and CLIs.

    Attributes:
        currency: Display currency code.
        profile: Default profile filter.
        show_sensitive_data: Whether amounts are displayed or masked.
        large_transaction_threshold: Amount above which a warning is logged.
    """

    currency: str = DEFAULT_CURRENCY
    profile: str = ALL_PROFILES
    show_sensitive_data: bool = True
    large_transaction_threshold: Decimal = Decimal(
        DEFAULT_LARGE_TRANSACTION_THRESHOLD
    )

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        return cls(
            currency=cls._read_currency(logger),
            profile=os.getenv("FINANCE_PROFILE", ALL_PROFILES).strip()
            or ALL_PROFILES,
            show_sensitive_data=cls._read_bool(
                "FINANCE_SHOW_SENSITIVE_DATA",
                True,
                logger,
            ),
            large_transaction_threshold=cls._read_threshold(logger),
        )

    def as_app_settings(self) -> AppSettings:
        """Return the user-editable part of these settings."""
        return AppSettings(
            currency=self.currency,
            large_transaction_threshold=self.large_transaction_threshold,
            show_sensitive_data=self.show_sensitive_data,
        )

    def with_stored(self, stored: AppSettings) -> "FinanceSettings":
        """Overlay settings persisted in the finance store.

        Args:
            stored: Settings read from the store.

        Returns:
            FinanceSettings: Copy using the stored currency, threshold and
            sensitive-data flag; the default profile is kept.
        """
        return replace(
            self,
            currency=stored.currency,
            large_transaction_threshold=stored.large_transaction_threshold,
            show_sensitive_data=stored.show_sensitive_data,
        )

    @staticmethod
    def _read_currency(logger) -> str:
        raw = os.getenv("FINANCE_CURRENCY", DEFAULT_CURRENCY)
        try:
            return normalize_currency_code(raw) or DEFAULT_CURRENCY
        except DataIntegrityError:
            logger.warning(
                f"Unsupported FINANCE_CURRENCY={raw!r}, "
                f"falling back to {DEFAULT_CURRENCY}"
            )
            return DEFAULT_CURRENCY

    @staticmethod
    def _read_bool(name: str, default: bool, logger) -> bool:
        raw = os.getenv(name)
        if raw is None:
            return default
        lowered = raw.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        logger.warning(f"Ignoring invalid boolean {name}={raw!r}")
        return default

    @staticmethod
    def _read_threshold(logger) -> Decimal:
        default = Decimal(DEFAULT_LARGE_TRANSACTION_THRESHOLD)
        raw = os.getenv("FINANCE_LARGE_TRANSACTION_THRESHOLD")
        if not raw:
            return default
        try:
            return Decimal(raw.strip())
        except InvalidOperation:
            logger.warning(
                f"Ignoring invalid FINANCE_LARGE_TRANSACTION_THRESHOLD={raw!r}"
            )
            return default


__all__ = ["FinanceSettings"]
