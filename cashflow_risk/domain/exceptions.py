"""Domain-specific exceptions"""

from typing import List


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidRecordError(DomainException):
    """Customer row is missing an ID or has a non-numeric score"""

    pass


class MissingColumnsError(DomainException):
    """Uploaded data lacks one or more required columns"""

    def __init__(self, missing: List[str]):
        self.missing = missing
        super().__init__(f"Missing columns: {', '.join(missing)}")


class EmptyDatasetError(DomainException):
    """No valid customer records to work with"""

    pass


class UnknownCustomerError(DomainException):
    """Requested customer ID is not in the processed batch"""

    pass
