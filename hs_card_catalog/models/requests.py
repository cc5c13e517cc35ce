"""
Request models for catalog queries.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


COST_TEN_PLUS = "10+"


class FilterCriteria(BaseModel):
    """
    Criteria accepted by the card filter.

    Every field is an optional raw query-string value. Missing and empty
    values impose no constraint; the browser form submits empty strings for
    unselected options.
    """
    set: Optional[str] = Field(None, description="Card set, case-insensitive exact match")
    type: Optional[str] = Field(None, description="Card type, case-insensitive exact match")
    class_name: Optional[str] = Field(
        None,
        alias="className",
        description="Card class, case-insensitive exact match against cardClass"
    )
    cost: Optional[str] = Field(
        None,
        description=f"Exact cost as a base-10 integer, or '{COST_TEN_PLUS}' for cost >= 10"
    )

    model_config = ConfigDict(populate_by_name=True)
