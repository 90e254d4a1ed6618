
class BookingValidationError(ValueError):
    """Raised when a booking is missing a mandatory field (e.g. service address)."""
    pass


class DateSelectionError(ValueError):
    """Raised when a date cannot be added to a multi-day selection (duplicate or limit reached)."""
    pass


class BookingSubmissionError(RuntimeError):
    """Raised when the booking backend rejects or fails to receive a payload."""
    pass
