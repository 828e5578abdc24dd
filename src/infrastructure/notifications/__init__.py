from .logging_notifier import LoggingOverdraftNotifier
from .recording_notifier import RecordingOverdraftNotifier

__all__ = ["LoggingOverdraftNotifier", "RecordingOverdraftNotifier"]
