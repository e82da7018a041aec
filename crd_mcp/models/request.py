"""Search request models."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

CONDITION_FIELDS = (
    "query",
    "crt_date_from",
    "crt_date_to",
    "reg_date_from",
    "reg_date_to",
    "lst_date_from",
    "lst_date_to",
)


class SearchType(str, Enum):
    """Record type to search."""

    REFERENCE = "reference"
    MANUAL = "manual"
    COLLECTION = "collection"
    PROFILE = "profile"
    ALL = "all"


class LibGroup(str, Enum):
    """Provider library category."""

    ALL = "all"
    NDL = "ndl"
    PUBLIC = "public"
    ACADEMIC = "academic"
    SPECIAL = "special"
    SCHOOL = "school"
    ARCHIVES = "archives"


class Condition(BaseModel):
    """Search condition; at least one field must be set."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "anyOf": [{"required": [name]} for name in CONDITION_FIELDS],
            "example": {"query": "question any 北海道"},
        },
    )

    query: Optional[str] = Field(
        None, description="CQL query over record fields, e.g. 'question any 北海道'"
    )
    crt_date_from: Optional[str] = Field(None, description="Creation date from (YYYYMMDD)")
    crt_date_to: Optional[str] = Field(None, description="Creation date to (YYYYMMDD)")
    reg_date_from: Optional[str] = Field(None, description="Registration date from (YYYYMMDD)")
    reg_date_to: Optional[str] = Field(None, description="Registration date to (YYYYMMDD)")
    lst_date_from: Optional[str] = Field(None, description="Last update date from (YYYYMMDD)")
    lst_date_to: Optional[str] = Field(None, description="Last update date to (YYYYMMDD)")

    @model_validator(mode="after")
    def require_any_field(self) -> "Condition":
        if all(getattr(self, name) is None for name in CONDITION_FIELDS):
            raise ValueError(
                "At least one of " + ", ".join(CONDITION_FIELDS) + " must be specified"
            )
        return self


class SearchRequest(BaseModel):
    """Typed CRD search request."""

    model_config = ConfigDict(frozen=True)

    type: SearchType = Field(SearchType.ALL, description="Record type to search")
    condition: Condition
    lib_id: Optional[str] = Field(
        None, description="Provider library code (exact match, also matches profile codes)"
    )
    lib_group: Optional[LibGroup] = Field(None, description="Restrict to a library group")
    results_get_position: Optional[int] = Field(
        None, ge=0, description="Position of the first result to return"
    )
    results_num: int = Field(100, ge=0, le=100, description="Maximum results to return")


__all__ = ["CONDITION_FIELDS", "SearchType", "LibGroup", "Condition", "SearchRequest"]
