class BankError(Exception):
    """Base class for errors raised by a bank implementation."""


class InvalidAmountError(BankError, ValueError):
    """Raised when a balance or transfer amount is negative."""
