"""Registry of live invoice ledgers, one per browsing session."""

import logging
import threading
import uuid
from collections import OrderedDict
from typing import Tuple

from pos_backend.app.core.errors import NotFound
from pos_backend.app.core.settings import get_settings
from pos_backend.app.services.ledger import InvoiceLedger

logger = logging.getLogger(__name__)


class LedgerRegistry:
    def __init__(self, max_sessions: int | None = None):
        self.max_sessions = max_sessions
        self._ledgers: "OrderedDict[str, InvoiceLedger]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._ledgers)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._ledgers

    def create(self) -> Tuple[str, InvoiceLedger]:
        session_id = uuid.uuid4().hex
        ledger = InvoiceLedger()
        with self._lock:
            self._ledgers[session_id] = ledger
            if self.max_sessions is not None:
                while len(self._ledgers) > self.max_sessions:
                    evicted, _ = self._ledgers.popitem(last=False)
                    logger.info("Evicted ledger session %s (limit %s)", evicted, self.max_sessions)
        logger.info("Opened ledger session %s", session_id)
        return session_id, ledger

    def get(self, session_id: str) -> InvoiceLedger:
        ledger = self._ledgers.get(session_id)
        if ledger is None:
            raise NotFound(f"Ledger session {session_id} not found")
        return ledger

    def discard(self, session_id: str) -> None:
        with self._lock:
            if self._ledgers.pop(session_id, None) is None:
                raise NotFound(f"Ledger session {session_id} not found")
        logger.info("Discarded ledger session %s", session_id)

    def clear(self) -> None:
        with self._lock:
            self._ledgers.clear()


ledger_registry = LedgerRegistry(max_sessions=get_settings().max_ledger_sessions)


def get_ledger_registry() -> LedgerRegistry:
    return ledger_registry
