"""Enums for the DynamoDB table service."""

from enum import Enum


class SortOrder(str, Enum):
    """Order in which a query walks the range key.

    Inherits from str so plain "asc"/"dsc" strings compare equal.
    """

    ASC = "asc"
    DESC = "dsc"

    @property
    def scan_index_forward(self) -> bool:
        """Value of the ScanIndexForward request flag for this order."""
        return self is SortOrder.ASC
