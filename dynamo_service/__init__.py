"""Typed item operations over DynamoDB tables."""

from .clients.dynamodb import BATCH_GET_LIMIT, TableService, create_dynamodb_resource
from .config.app import AppConfig
from .exceptions import (
    ContractViolationError,
    DynamoServiceError,
    MissingRangeKeyError,
    RangeBoundsInvertedError,
    UnknownIndexError,
)
from .models import IndexConfig, KeyDescriptor, Page, SortOrder, TableConfig

__all__ = [
    "AppConfig",
    "BATCH_GET_LIMIT",
    "TableService",
    "create_dynamodb_resource",
    "DynamoServiceError",
    "ContractViolationError",
    "MissingRangeKeyError",
    "RangeBoundsInvertedError",
    "UnknownIndexError",
    "IndexConfig",
    "KeyDescriptor",
    "Page",
    "SortOrder",
    "TableConfig",
]
