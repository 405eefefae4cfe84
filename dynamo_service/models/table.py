"""Table binding models."""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from ..exceptions import UnknownIndexError


class IndexConfig(BaseModel):
    """A secondary index declared on a table.

    Attributes:
        name: Index name as created in DynamoDB
        hash_key: Partition key attribute of the index
        range_key: Optional sort key attribute of the index
    """

    name: str = Field(..., description="Index name")
    hash_key: str = Field(..., description="Partition key attribute of the index")
    range_key: Optional[str] = Field(None, description="Sort key attribute of the index")


class TableConfig(BaseModel):
    """A DynamoDB table binding, resolved once per service.

    Attributes:
        name: Physical table name
        hash_key: Partition key attribute
        range_key: Optional sort key attribute
        indexes: Secondary indexes that can be queried
    """

    name: str = Field(..., description="Physical table name")
    hash_key: str = Field(..., description="Partition key attribute")
    range_key: Optional[str] = Field(None, description="Sort key attribute")
    indexes: List[IndexConfig] = Field(
        default_factory=list, description="Queryable secondary indexes"
    )

    def get_index(self, index_name: str) -> IndexConfig:
        """Look up a declared index by name.

        Raises:
            UnknownIndexError: If the table does not declare the index
        """
        for index in self.indexes:
            if index.name == index_name:
                return index
        raise UnknownIndexError(table_name=self.name, index_name=index_name)

    def key_names(self, index_name: Optional[str] = None) -> Tuple[str, Optional[str]]:
        """Return the (hash, range) attribute names for the table or one of its indexes."""
        if index_name is None:
            return self.hash_key, self.range_key
        index = self.get_index(index_name)
        return index.hash_key, index.range_key

    def build_key(self, hash_value: Any, range_value: Any = None) -> Dict[str, Any]:
        """Build the primary key of an item.

        The range key is included only when the table has one and a value
        is given. Zero is a value.
        """
        key = {self.hash_key: hash_value}
        if self.range_key is not None and range_value is not None:
            key[self.range_key] = range_value
        return key


class KeyDescriptor(BaseModel):
    """Key of a single item to fetch in a batch."""

    hash_value: Any
    range_value: Any = None
