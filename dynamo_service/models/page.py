"""Result page model for paginated reads."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Page(BaseModel):
    """One page of a scan or query.

    Attributes:
        items: Items returned by this request
        last_evaluated_key: Opaque continuation token, absent on the last page
    """

    items: List[Dict[str, Any]] = Field(default_factory=list)
    last_evaluated_key: Optional[Dict[str, Any]] = Field(
        None, description="Pass back as exclusive_start_key to fetch the next page"
    )

    @property
    def has_more(self) -> bool:
        return self.last_evaluated_key is not None
