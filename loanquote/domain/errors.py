class AppError(Exception):
    status_code = 400
    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        if status_code:
            self.status_code = status_code
        self.message = message

class BadRequest(AppError):
    status_code = 400

class UpstreamError(AppError):
    status_code = 502


class QuoteError(AppError):
    """Base for every failure the quote engine or its loaders can report."""


# --------------- request validation ---------------

class AmountOutOfRangeError(QuoteError):
    def __init__(self, message: str, amount: int, bound: int):
        super().__init__(message)
        self.amount = amount
        self.bound = bound

class AmountTooLowError(AmountOutOfRangeError):
    def __init__(self, amount: int, bound: int):
        super().__init__(
            f"Loan amount of £{amount} is too low. Minimum loan amount is £{bound}",
            amount, bound,
        )

class AmountTooHighError(AmountOutOfRangeError):
    def __init__(self, amount: int, bound: int):
        super().__init__(
            f"Loan amount of £{amount} is too high. Maximum loan amount is £{bound}",
            amount, bound,
        )

class AmountNotMultipleError(QuoteError):
    def __init__(self, amount: int, multiple: int):
        super().__init__(f"Loan amount must be a multiple of £{multiple}")
        self.amount = amount
        self.multiple = multiple

class InvalidTermError(QuoteError):
    def __init__(self, term_months):
        super().__init__(f"Loan term must be a positive number of months, got {term_months}")
        self.term_months = term_months


# --------------- allocation ---------------

class InsufficientFundsError(QuoteError):
    """The pool ran dry before the requested amount was covered."""
    status_code = 422

    def __init__(self, requested: int, available: int):
        super().__init__("It is not possible to provide a quote at this time.")
        self.requested = requested
        self.available = available

    @property
    def shortfall(self) -> int:
        return self.requested - self.available


# --------------- lender sources ---------------

class LenderSourceError(QuoteError):
    pass

class FieldParseError(LenderSourceError):
    """
    A single field of a lender row could not be converted.
    Carries the 1-based line number (header included), the field name
    and the underlying exception.
    """
    def __init__(self, line_no: int, field: str, cause: Exception):
        super().__init__(
            f"Error unmarshalling {field} field on line {line_no}. Cause: {cause}"
        )
        self.line_no = line_no
        self.field = field
        self.cause = cause
