"""
Infrastructure Adapter: Recording Overdraft Notifier
Keeps overdraft notices in memory so callers can inspect them
"""

from domain.events import OverdraftUsed
from domain.ports.overdraft_notifier import IOverdraftNotifier


class RecordingOverdraftNotifier(IOverdraftNotifier):
    def __init__(self):
        self.events: list[OverdraftUsed] = []

    def notify(self, event: OverdraftUsed) -> None:
        self.events.append(event)

    @property
    def last(self):
        """Most recent notice, or None"""
        return self.events[-1] if self.events else None

    def clear(self) -> None:
        self.events.clear()
