"""Table service wrapping DynamoDB item operations."""

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

import boto3
from aws_lambda_powertools.logging import Logger
from botocore.exceptions import BotoCoreError, ClientError

from ..config.app import AppConfig
from ..exceptions import (
    IncomparableRangeBoundsError,
    InvalidLimitError,
    MissingRangeKeyError,
    RangeBoundsInvertedError,
)
from ..models.enums import SortOrder
from ..models.page import Page
from ..models.table import KeyDescriptor, TableConfig
from ..utils.chunking import chunk
from .expressions import (
    between_condition,
    build_update_expression,
    filter_condition,
    key_condition,
)

logger = Logger()

# DynamoDB BatchGetItem accepts at most 100 keys per request
BATCH_GET_LIMIT = 100


def create_dynamodb_resource(config: AppConfig) -> Any:
    """Create a boto3 DynamoDB service resource from application configuration.

    Args:
        config: Application configuration

    Returns:
        DynamoDB service resource to inject into a TableService
    """
    return boto3.resource(
        "dynamodb",
        region_name=config.aws_region,
        endpoint_url=config.dynamodb_endpoint_url,
    )


class TableService:
    """Item operations for a single DynamoDB table.

    The service is bound once to a table configuration and an explicitly
    injected DynamoDB service resource. Per-table application services hold
    a TableService and expose its operations under their own names.
    """

    def __init__(self, table: TableConfig, dynamodb: Any) -> None:
        """Initialize the table service.

        Args:
            table: Table binding (name, key attributes, indexes)
            dynamodb: boto3 DynamoDB service resource
        """
        self.table_config = table
        self.dynamodb = dynamodb
        self.table = dynamodb.Table(table.name)

    def _send(
        self, operation: str, call: Callable[..., Dict[str, Any]], **params: Any
    ) -> Dict[str, Any]:
        """Issue one remote call, logging the request and any failure.

        Remote failures are re-raised unchanged.
        """
        logger.debug(
            f"Sending DynamoDB {operation} request",
            extra={"table": self.table_config.name, "params": params},
        )
        try:
            return call(**params)
        except (ClientError, BotoCoreError) as e:
            logger.warning(
                f"DynamoDB {operation} request failed",
                extra={"table": self.table_config.name, "error": str(e)},
            )
            raise

    @staticmethod
    def _check_limit(limit: Optional[int]) -> None:
        """Reject negative limits. A zero limit is served locally with no items."""
        if limit is not None and limit < 0:
            raise InvalidLimitError(limit=limit)

    def save(self, item: Mapping[str, Any]) -> Dict[str, Any]:
        """Create an item or update the given attributes of an existing one.

        Key attributes are addressed through the key and never written by the
        update expression. An item holding only its key attributes is created
        if missing and left untouched if present.

        Args:
            item: Attributes to write, including the key attributes

        Returns:
            The full item as stored after the update
        """
        hash_key = self.table_config.hash_key
        range_key = self.table_config.range_key

        key = {hash_key: item.get(hash_key)}
        if range_key is not None:
            key[range_key] = item.get(range_key)

        params: Dict[str, Any] = {"Key": key, "ReturnValues": "ALL_NEW"}

        update = build_update_expression(item, exclude=(hash_key, range_key))
        if update is not None:
            params["UpdateExpression"] = update.expression
            params["ExpressionAttributeNames"] = update.names
            params["ExpressionAttributeValues"] = update.values

        response = self._send("UpdateItem", self.table.update_item, **params)
        return response.get("Attributes", {})

    def get(
        self,
        hash_value: Any,
        range_value: Any = None,
        index: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """Fetch a single item.

        GetItem does not work on secondary indexes, so lookups by index are
        served by a one-item query against the index keys.

        Args:
            hash_value: Hash key value
            range_value: Range key value, ignored when None
            index: Optional secondary index name

        Returns:
            The item, or None if no item matches
        """
        if index is not None:
            items = self.query(hash_value, range_value, index=index, limit=1)
            return items[0] if items else None

        key = self.table_config.build_key(hash_value, range_value)
        response = self._send("GetItem", self.table.get_item, Key=key)
        return response.get("Item")

    def _query_params(
        self,
        hash_value: Any,
        range_value: Any,
        index: Optional[str],
        order: Optional[Union[SortOrder, str]],
        limit: Optional[int],
    ) -> Dict[str, Any]:
        hash_key, range_key = self.table_config.key_names(index)

        params: Dict[str, Any] = {
            "KeyConditionExpression": key_condition(
                hash_key, hash_value, range_key, range_value
            )
        }
        if order is not None:
            params["ScanIndexForward"] = SortOrder(order).scan_index_forward
        if limit is not None:
            params["Limit"] = limit
        if index is not None:
            params["IndexName"] = index
        return params

    def query_page(
        self,
        hash_value: Any,
        range_value: Any = None,
        index: Optional[str] = None,
        order: Optional[Union[SortOrder, str]] = None,
        limit: Optional[int] = None,
        exclusive_start_key: Optional[Dict[str, Any]] = None,
    ) -> Page:
        """Run one Query request and return its page with the continuation token.

        Args:
            hash_value: Hash key value
            range_value: Optional range key value to match exactly
            index: Optional secondary index name
            order: "asc" or "dsc", remote default (ascending) when omitted
            limit: Maximum number of items to evaluate
            exclusive_start_key: Token returned by the previous page

        Returns:
            Page of matching items, empty without a remote call when limit is 0

        Raises:
            InvalidLimitError: If limit is negative
        """
        self._check_limit(limit)
        params = self._query_params(hash_value, range_value, index, order, limit)
        if limit == 0:
            return Page()
        if exclusive_start_key is not None:
            params["ExclusiveStartKey"] = exclusive_start_key

        response = self._send("Query", self.table.query, **params)
        return Page(
            items=response.get("Items", []),
            last_evaluated_key=response.get("LastEvaluatedKey"),
        )

    def query(
        self,
        hash_value: Any,
        range_value: Any = None,
        index: Optional[str] = None,
        order: Optional[Union[SortOrder, str]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Query a partition of the table or of a secondary index.

        Only the first result page is returned; use query_page to continue.
        """
        return self.query_page(
            hash_value, range_value, index=index, order=order, limit=limit
        ).items

    def query_between(
        self,
        hash_value: Any,
        start: Any,
        end: Any,
        index: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Query a partition for range key values between start and end, inclusive.

        Identical start and end values fetch a single item.

        Args:
            hash_value: Hash key value
            start: Lowest range key value
            end: Highest range key value
            index: Optional secondary index name

        Returns:
            Items of the first result page, in ascending range key order

        Raises:
            RangeBoundsInvertedError: If start is greater than end
            IncomparableRangeBoundsError: If start and end cannot be ordered
            MissingRangeKeyError: If the table or index has no range key
        """
        hash_key, range_key = self.table_config.key_names(index)
        if range_key is None:
            raise MissingRangeKeyError(table_name=self.table_config.name, index_name=index)
        try:
            inverted = start > end
        except TypeError as e:
            raise IncomparableRangeBoundsError(start=start, end=end) from e
        if inverted:
            raise RangeBoundsInvertedError(start=start, end=end)

        params: Dict[str, Any] = {
            "KeyConditionExpression": between_condition(
                hash_key, hash_value, range_key, start, end
            )
        }
        if index is not None:
            params["IndexName"] = index

        response = self._send("Query", self.table.query, **params)
        return response.get("Items", [])

    def batch_get(self, keys: Sequence[KeyDescriptor]) -> List[Dict[str, Any]]:
        """Fetch many items, batching up to 100 keys per BatchGetItem request.

        Items come back in response order, not in the order of ``keys``.
        Repeated keys are requested once. Missing items are omitted.
        Unprocessed keys are not retried.

        Args:
            keys: Keys of the items to fetch

        Returns:
            Items found
        """
        table_name = self.table_config.name
        item_keys = []
        seen = set()
        for key in keys:
            item_key = self.table_config.build_key(key.hash_value, key.range_value)
            identity = tuple(item_key.items())
            if identity in seen:
                continue
            seen.add(identity)
            item_keys.append(item_key)

        results: List[Dict[str, Any]] = []
        for key_chunk in chunk(item_keys, BATCH_GET_LIMIT):
            response = self._send(
                "BatchGetItem",
                self.dynamodb.batch_get_item,
                RequestItems={table_name: {"Keys": key_chunk}},
            )
            results.extend(response.get("Responses", {}).get(table_name, []))

            unprocessed = (
                response.get("UnprocessedKeys", {}).get(table_name, {}).get("Keys", [])
            )
            if unprocessed:
                logger.warning(
                    "BatchGetItem left keys unprocessed",
                    extra={"table": table_name, "unprocessed_count": len(unprocessed)},
                )

        return results

    def list_page(
        self,
        filters: Optional[Mapping[str, Any]] = None,
        limit: Optional[int] = None,
        exclusive_start_key: Optional[Dict[str, Any]] = None,
    ) -> Page:
        """Scan one page of the table.

        Filters are applied by DynamoDB after reading, so a page may hold
        fewer than ``limit`` items and still have a continuation token.

        Args:
            filters: Attribute values that returned items must equal
            limit: Maximum number of items to evaluate
            exclusive_start_key: Token returned by the previous page

        Returns:
            Page of items, without a token once the table is exhausted.
            Empty without a remote call when limit is 0.

        Raises:
            InvalidLimitError: If limit is negative
        """
        self._check_limit(limit)
        if limit == 0:
            return Page()

        params: Dict[str, Any] = {}
        if limit is not None:
            params["Limit"] = limit
        condition = filter_condition(filters)
        if condition is not None:
            params["FilterExpression"] = condition
        if exclusive_start_key is not None:
            params["ExclusiveStartKey"] = exclusive_start_key

        response = self._send("Scan", self.table.scan, **params)
        return Page(
            items=response.get("Items", []),
            last_evaluated_key=response.get("LastEvaluatedKey"),
        )

    def list_items(
        self,
        filters: Optional[Mapping[str, Any]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Scan the table, following continuation tokens.

        Scanning stops when the table is exhausted or ``limit`` items have
        been collected. Scans read the whole table and can be expensive.

        Args:
            filters: Attribute values that returned items must equal
            limit: Maximum number of items to return

        Returns:
            Matching items, at most ``limit`` of them

        Raises:
            InvalidLimitError: If limit is negative
        """
        self._check_limit(limit)
        if limit == 0:
            return []

        items: List[Dict[str, Any]] = []
        exclusive_start_key = None

        while True:
            page = self.list_page(filters, limit, exclusive_start_key)
            items.extend(page.items)

            if limit is not None and len(items) >= limit:
                items = items[:limit]
                break

            if not page.has_more:
                break
            exclusive_start_key = page.last_evaluated_key

        return items

    def get_all(self) -> List[Dict[str, Any]]:
        """Return every item in the table."""
        return self.list_items()

    def delete(self, hash_value: Any, range_value: Any = None) -> None:
        """Delete an item by its key. Deleting a missing item is not an error.

        Args:
            hash_value: Hash key value
            range_value: Range key value, required for range-keyed tables
        """
        key = self.table_config.build_key(hash_value, range_value)
        self._send("DeleteItem", self.table.delete_item, Key=key)
