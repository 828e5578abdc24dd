"""
Infrastructure Adapter: Logging Overdraft Notifier
Reports overdraft notices through the logging module
"""

import logging

from domain.events import OverdraftUsed
from domain.ports.overdraft_notifier import IOverdraftNotifier

logger = logging.getLogger(__name__)


class LoggingOverdraftNotifier(IOverdraftNotifier):
    """Writes each overdraft notice as a WARNING record"""

    def __init__(self, log: logging.Logger = logger):
        self._log = log

    def notify(self, event: OverdraftUsed) -> None:
        self._log.warning(
            f"Overdraft used: {event.amount_overdrawn} "
            f"(account={event.account_number}, balance={event.balance})"
        )
