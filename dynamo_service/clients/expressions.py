"""Builders for DynamoDB update expressions, key conditions and scan filters."""

from functools import reduce
from typing import Any, Dict, Iterable, Mapping, NamedTuple, Optional

from boto3.dynamodb.conditions import Attr, ConditionBase, Key


class UpdateExpression(NamedTuple):
    """SET clause with its placeholder maps, ready to pass to UpdateItem."""

    expression: str
    names: Dict[str, str]
    values: Dict[str, Any]


def build_update_expression(
    attributes: Mapping[str, Any], exclude: Iterable[Optional[str]] = ()
) -> Optional[UpdateExpression]:
    """Build a SET expression for every attribute not listed in ``exclude``.

    Placeholders are positional (#n0/:v0, #n1/:v1, ...) so reserved words and
    attribute names with characters not allowed in placeholders are safe.

    Args:
        attributes: Attributes to write
        exclude: Attribute names to leave out, typically the key attributes

    Returns:
        The update expression, or None if nothing is left to set
    """
    skipped = {name for name in exclude if name is not None}

    assignments = []
    names: Dict[str, str] = {}
    values: Dict[str, Any] = {}

    for attribute, value in attributes.items():
        if attribute in skipped:
            continue
        position = len(assignments)
        name_placeholder = f"#n{position}"
        value_placeholder = f":v{position}"

        assignments.append(f"{name_placeholder} = {value_placeholder}")
        names[name_placeholder] = attribute
        values[value_placeholder] = value

    if not assignments:
        return None

    return UpdateExpression("SET " + ", ".join(assignments), names, values)


def key_condition(
    hash_key: str,
    hash_value: Any,
    range_key: Optional[str] = None,
    range_value: Any = None,
) -> ConditionBase:
    """Equality condition on the hash key, and on the range key when a value is given."""
    condition = Key(hash_key).eq(hash_value)
    if range_key is not None and range_value is not None:
        condition = condition & Key(range_key).eq(range_value)
    return condition


def between_condition(
    hash_key: str, hash_value: Any, range_key: str, start: Any, end: Any
) -> ConditionBase:
    """Hash key equality plus an inclusive BETWEEN on the range key."""
    return Key(hash_key).eq(hash_value) & Key(range_key).between(start, end)


def filter_condition(filters: Optional[Mapping[str, Any]]) -> Optional[ConditionBase]:
    """AND together one equality condition per filter, or None if there are none."""
    if not filters:
        return None
    conditions = [Attr(name).eq(value) for name, value in filters.items()]
    return reduce(lambda left, right: left & right, conditions)
