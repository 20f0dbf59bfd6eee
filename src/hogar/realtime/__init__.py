"""Change notification for Hogar tables."""
from .notifier import (
    ChangeEvent,
    ChangeNotifier,
    Subscription,
    TableVersions,
    WatchedSession,
    INSERT,
    UPDATE,
    DELETE,
)

__all__ = [
    'ChangeEvent',
    'ChangeNotifier',
    'Subscription',
    'TableVersions',
    'WatchedSession',
    'INSERT',
    'UPDATE',
    'DELETE',
]
