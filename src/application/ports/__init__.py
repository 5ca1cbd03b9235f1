"""Application ports package."""

from .database import DatabaseEnginePort
from .finance_store import FinanceStorePort

__all__ = ["DatabaseEnginePort", "FinanceStorePort"]
