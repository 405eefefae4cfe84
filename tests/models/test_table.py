"""Unit tests for the table binding models."""

import unittest

from dynamo_service.exceptions import ContractViolationError, UnknownIndexError
from dynamo_service.models import IndexConfig, Page, SortOrder, TableConfig


class TestTableConfig(unittest.TestCase):
    """Test cases for TableConfig."""

    def setUp(self):
        self.table = TableConfig(
            name="orders",
            hash_key="customerId",
            range_key="orderNumber",
            indexes=[IndexConfig(name="byStatus", hash_key="status")],
        )

    def test_build_key_includes_zero_range_value(self):
        self.assertEqual(
            {"customerId": "c-1", "orderNumber": 0}, self.table.build_key("c-1", 0)
        )

    def test_build_key_without_range_value(self):
        self.assertEqual({"customerId": "c-1"}, self.table.build_key("c-1"))

    def test_build_key_on_hash_only_table_ignores_range_value(self):
        table = TableConfig(name="customers", hash_key="customerId")

        self.assertEqual({"customerId": "c-1"}, table.build_key("c-1", 4))

    def test_key_names_for_table_and_index(self):
        self.assertEqual(("customerId", "orderNumber"), self.table.key_names())
        self.assertEqual(("status", None), self.table.key_names("byStatus"))

    def test_unknown_index_is_a_contract_violation(self):
        with self.assertRaises(UnknownIndexError) as ctx:
            self.table.get_index("byDate")

        self.assertIsInstance(ctx.exception, ContractViolationError)
        self.assertEqual({"table": "orders", "index": "byDate"}, ctx.exception.details)


class TestSortOrder(unittest.TestCase):
    """Test cases for SortOrder."""

    def test_accepts_wire_strings(self):
        self.assertIs(SortOrder.ASC, SortOrder("asc"))
        self.assertIs(SortOrder.DESC, SortOrder("dsc"))

    def test_scan_index_forward(self):
        self.assertTrue(SortOrder.ASC.scan_index_forward)
        self.assertFalse(SortOrder.DESC.scan_index_forward)


class TestPage(unittest.TestCase):
    """Test cases for Page."""

    def test_has_more_follows_token(self):
        self.assertFalse(Page(items=[]).has_more)
        self.assertTrue(Page(items=[], last_evaluated_key={"id": "x"}).has_more)
