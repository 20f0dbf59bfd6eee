"""Table-level change notifications driven by SQLAlchemy session events."""
import threading
import weakref
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Iterable, List, Set

from sqlalchemy import event
from sqlalchemy.orm import Session

from hogar.utils.logger import get_logger

logger = get_logger(__name__)

INSERT = "insert"
UPDATE = "update"
DELETE = "delete"


@dataclass(frozen=True)
class ChangeEvent:
    """Something changed in ``table``; carries no row data."""
    table: str
    operations: FrozenSet[str]


ChangeCallback = Callable[[ChangeEvent], None]


@dataclass(eq=False)
class Subscription:
    """Handle returned by :meth:`ChangeNotifier.subscribe`."""
    table: str
    callback: ChangeCallback
    _notifier: "ChangeNotifier" = field(repr=False)
    active: bool = True

    def unsubscribe(self) -> None:
        if self.active:
            self._notifier._remove(self)
            self.active = False


class ChangeNotifier:
    """
    Calls subscribers after a commit touched the tables they watch.

    Changes are collected on every flush and delivered once per table when
    the session commits, however many rows changed. A rollback drops them.
    Callbacks run after the transaction has ended, so they should record the
    change (or schedule a refetch) rather than query through the same session.
    """

    def __init__(self):
        self._subscriptions: Dict[str, List[Subscription]] = defaultdict(list)
        self._lock = threading.Lock()
        self._info_key = f"hogar_changes_{id(self)}"

    def subscribe(self, table: str, callback: ChangeCallback) -> Subscription:
        """Register ``callback`` for inserts, updates and deletes on ``table``."""
        subscription = Subscription(table=table, callback=callback, _notifier=self)
        with self._lock:
            self._subscriptions[table].append(subscription)
        logger.debug("Subscribed to table changes", table=table)
        return subscription

    def _remove(self, subscription: Subscription) -> None:
        with self._lock:
            subscribers = self._subscriptions.get(subscription.table, [])
            if subscription in subscribers:
                subscribers.remove(subscription)
        logger.debug("Unsubscribed from table changes", table=subscription.table)

    def subscribed_tables(self) -> Set[str]:
        with self._lock:
            return {table for table, subs in self._subscriptions.items() if subs}

    def attach(self, session: Session) -> None:
        """Start watching ``session`` for committed changes."""
        if not event.contains(session, "after_flush", self._after_flush):
            event.listen(session, "after_flush", self._after_flush)
            event.listen(session, "after_commit", self._after_commit)
            event.listen(session, "after_rollback", self._after_rollback)

    def detach(self, session: Session) -> None:
        """Stop watching ``session``; uncommitted changes are forgotten."""
        if event.contains(session, "after_flush", self._after_flush):
            event.remove(session, "after_flush", self._after_flush)
            event.remove(session, "after_commit", self._after_commit)
            event.remove(session, "after_rollback", self._after_rollback)
        session.info.pop(self._info_key, None)

    def _pending(self, session: Session) -> Dict[str, Set[str]]:
        return session.info.setdefault(self._info_key, defaultdict(set))

    def _after_flush(self, session: Session, flush_context) -> None:
        watched = self.subscribed_tables()
        if not watched:
            return
        pending = self._pending(session)
        for operation, objects in (
            (INSERT, session.new),
            (UPDATE, session.dirty),
            (DELETE, session.deleted),
        ):
            for obj in objects:
                table = getattr(getattr(obj, "__table__", None), "name", None)
                if table not in watched:
                    continue
                if operation == UPDATE and not session.is_modified(obj, include_collections=False):
                    continue
                pending[table].add(operation)

    def _after_rollback(self, session: Session) -> None:
        session.info.pop(self._info_key, None)

    def _after_commit(self, session: Session) -> None:
        pending = session.info.pop(self._info_key, None)
        if not pending:
            return
        for table, operations in pending.items():
            self.publish(ChangeEvent(table=table, operations=frozenset(operations)))

    def publish(self, change: ChangeEvent) -> None:
        """Deliver ``change`` to every subscriber of its table."""
        with self._lock:
            subscribers = list(self._subscriptions.get(change.table, []))
        logger.debug(
            "Publishing table change",
            table=change.table,
            operations=sorted(change.operations),
            subscribers=len(subscribers)
        )
        for subscription in subscribers:
            try:
                subscription.callback(change)
            except Exception:
                logger.exception("Change callback failed", table=change.table)


class TableVersions:
    """Thread-safe change counter per table, fed by a :class:`ChangeNotifier`."""

    def __init__(self, notifier: ChangeNotifier, tables: Iterable[str]):
        self._lock = threading.Lock()
        self._versions: Dict[str, int] = {table: 0 for table in tables}
        for table in self._versions:
            notifier.subscribe(table, self.bump)

    def bump(self, change: ChangeEvent) -> None:
        with self._lock:
            self._versions[change.table] = self._versions.get(change.table, 0) + 1

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._versions)


def _release(notifier: ChangeNotifier, session: Session) -> None:
    notifier.detach(session)
    session.close()
    logger.debug("Released watched session")


class WatchedSession:
    """
    A session attached to ``notifier`` until :meth:`close` is called or the
    handle is garbage collected, whichever comes first.
    """

    def __init__(self, notifier: ChangeNotifier, session: Session):
        self.session = session
        notifier.attach(session)
        self._finalizer = weakref.finalize(self, _release, notifier, session)

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def close(self) -> None:
        self._finalizer()
