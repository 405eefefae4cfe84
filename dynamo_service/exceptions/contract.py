"""Contract violations detected before any remote call is made."""

from typing import Any, Dict, Optional

from . import DynamoServiceError


class ContractViolationError(DynamoServiceError):
    """Base class for caller errors that never reach DynamoDB."""

    pass


class RangeBoundsInvertedError(ContractViolationError):
    """Raised when a between query has a start value greater than its end value."""

    def __init__(
        self,
        start: Any,
        end: Any,
        message: str = "QueryBetween start value is greater than end value",
        code: str = "RANGE_BOUNDS_INVERTED",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            details={"start": start, "end": end, **(details or {})},
        )


class UnknownIndexError(ContractViolationError):
    """Raised when an operation names an index the table does not declare."""

    def __init__(
        self,
        table_name: str,
        index_name: str,
        message: str = "Index is not declared on table",
        code: str = "UNKNOWN_INDEX",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            details={"table": table_name, "index": index_name, **(details or {})},
        )


class MissingRangeKeyError(ContractViolationError):
    """Raised when a range key operation targets a hash-only table or index."""

    def __init__(
        self,
        table_name: str,
        index_name: Optional[str] = None,
        message: str = "Operation requires a range key",
        code: str = "MISSING_RANGE_KEY",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            details={"table": table_name, "index": index_name, **(details or {})},
        )


class IncomparableRangeBoundsError(ContractViolationError):
    """Raised when between query bounds cannot be ordered against each other."""

    def __init__(
        self,
        start: Any,
        end: Any,
        message: str = "QueryBetween start and end values are not comparable",
        code: str = "RANGE_BOUNDS_INCOMPARABLE",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            details={"start": start, "end": end, **(details or {})},
        )


class InvalidLimitError(ContractViolationError):
    """Raised when a result limit is negative."""

    def __init__(
        self,
        limit: int,
        message: str = "Limit must not be negative",
        code: str = "INVALID_LIMIT",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            details={"limit": limit, **(details or {})},
        )
