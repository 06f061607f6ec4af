"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class IndexOutOfRange(DomainException, IndexError):
    """Removal requested at a position that holds no record"""

    def __init__(self, index: int, size: int):
        super().__init__(f"Index {index} out of range for {size} record(s)")
        self.index = index
        self.size = size


class InvalidRecordError(DomainException, ValueError):
    """Record fields violate the positive-amount / non-empty-name rules"""

    pass
