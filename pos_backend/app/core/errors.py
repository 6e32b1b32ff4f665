"""Domain errors raised by the invoice ledger and its session registry."""


class LedgerError(Exception):
    """Base class for recoverable ledger failures."""


class InvalidArgument(LedgerError, ValueError):
    """A precondition on an operation argument was violated."""


class NotFound(LedgerError, KeyError):
    """An operation referenced a line or session that does not exist."""

    def __str__(self):
        # KeyError quotes its argument; keep the plain message for API responses.
        return str(self.args[0]) if self.args else ""
