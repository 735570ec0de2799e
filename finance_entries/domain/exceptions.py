"""Domain-specific exceptions for the entry lifecycle."""


class BusinessRuleError(ValueError):
    """Raised when an entry breaks a business rule.

    The caller can fix the input and retry; ``reason`` is meant to be shown
    to the end user.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class MissingEntryIdError(RuntimeError):
    """Raised when an entry without identifier reaches update or delete."""


__all__ = ["BusinessRuleError", "MissingEntryIdError"]
