"""Exception handling for the DynamoDB table service."""

from typing import Any, Dict, Optional


class DynamoServiceError(Exception):
    """Base exception for all table service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


from .contract import (
    ContractViolationError,
    IncomparableRangeBoundsError,
    InvalidLimitError,
    MissingRangeKeyError,
    RangeBoundsInvertedError,
    UnknownIndexError,
)

__all__ = [
    # Base
    "DynamoServiceError",
    # Contract violations
    "ContractViolationError",
    "IncomparableRangeBoundsError",
    "InvalidLimitError",
    "MissingRangeKeyError",
    "RangeBoundsInvertedError",
    "UnknownIndexError",
]
