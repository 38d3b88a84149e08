from bounceball.workers.balance_worker import (
    BalanceRequest,
    BalanceWorker,
    start_balance_thread,
)

__all__ = ["BalanceRequest", "BalanceWorker", "start_balance_thread"]
