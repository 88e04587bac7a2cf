"""Domain errors."""


class FoodJournalError(ValueError):
    """Base error for rejected journal requests."""


class InvalidWindowError(FoodJournalError):
    """Raised when window parameters are out of range."""
