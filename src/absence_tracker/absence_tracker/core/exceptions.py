class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class EmptyNameError(ValidationError):
    """Raised when a student name is blank after trimming."""


class DuplicateNameError(ValidationError):
    """Raised when a student name is already used (case-insensitive)."""


class EmptyIdError(ValidationError):
    """Raised when a student id is blank after trimming."""


class DuplicateIdError(ValidationError):
    """Raised when a student id is already used."""


class StudentNotFoundError(DomainError):
    """Raised when no student matches the given id."""
