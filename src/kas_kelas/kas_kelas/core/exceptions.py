class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidCadence(ValidationError):
    """Raised when a cadence configuration is missing, inactive or malformed.

    Fatal for the scope it belongs to: no dues can be computed without it.
    """


class MalformedRecord(ValidationError):
    """Raised for a single transaction with an unparseable date or amount.

    Aggregations catch it per record, log a warning and carry on.
    """
