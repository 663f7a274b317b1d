"""Domain-specific exceptions"""

from typing import Dict


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InputValidationError(DomainException):
    """One or more inputs are missing or outside their allowed range"""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(self.errors.values()) or "Invalid inputs")


class MissingInputError(InputValidationError):
    """A required input is missing or non-numeric"""

    pass


class FinancialLogicError(InputValidationError):
    """Inputs pass range checks but imply g >= r or g < 0"""

    pass


class ComputationError(DomainException):
    """Calculation hit a zero denominator or produced a non-finite value"""

    pass


class InvalidGrowthError(DomainException):
    """Growth rate is not below the required return"""

    pass
