"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class MalformedRecordError(DomainException):
    """A roster row is missing fields or has an unparsable billing amount"""

    pass


class InvalidParametersError(DomainException):
    """Plan parameters are structurally invalid (term, rate, quantities)"""

    pass
