class LedgerError(Exception):
    """Base class for errors raised by the group services."""


class GroupNotFoundError(LedgerError, LookupError):
    pass


class MemberNotFoundError(LedgerError, LookupError):
    pass


class EventNotFoundError(LedgerError, LookupError):
    pass


class InvalidExpenseError(LedgerError, ValueError):
    pass


class MemberConflictError(LedgerError, ValueError):
    pass


class InvalidNameError(LedgerError, ValueError):
    pass
