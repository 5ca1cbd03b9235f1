"""CLI adapter clearing subscription paid flags from past periods.

Meant to run at the start of each month, for example from cron.
"""

from src.application.use_cases.pay_subscription import (
    ResetSubscriptionPeriodsUseCase,
)
from src.infrastructure.container import build_finance_store
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the subscription period reset."""
    logger = get_app_logger()
    use_case = ResetSubscriptionPeriodsUseCase(
        store=build_finance_store(),
        logger=logger,
    )

    reset_count = use_case.execute()

    print(f"Reset {reset_count} subscriptions for the new period.")


if __name__ == "__main__":  # pragma: no cover
    main()
