"""Models for the DynamoDB table service."""

from .enums import SortOrder
from .page import Page
from .table import IndexConfig, KeyDescriptor, TableConfig

__all__ = [
    "SortOrder",
    "Page",
    "IndexConfig",
    "KeyDescriptor",
    "TableConfig",
]
