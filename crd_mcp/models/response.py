"""Normalized search response returned to tool callers."""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .upstream import Bibl, NdcClass


class _Normalized(BaseModel):
    model_config = ConfigDict(frozen=True)


class ProfileSystemInfo(_Normalized):
    """System-managed fields of a library profile."""

    registered_at: str = Field(..., description="Registration timestamp")
    updated_at: str = Field(..., description="Last update timestamp")
    library_id: str = Field(..., description="Provider library code")
    library_name: str = Field(..., description="Provider library name")
    file_count: int = Field(0, ge=0, description="Number of attached files (0 if none)")


class SystemInfo(ProfileSystemInfo):
    """System-managed fields of a reference, manual or collection record."""

    system_id: str = Field(..., description="Internal registration number")


class ReferenceResult(_Normalized):
    """Reference case (question and answer)."""

    type: Literal["reference"] = "reference"
    url: str
    question: str
    registration_id: str
    answer: str
    created_at: str
    is_solution: bool
    keywords: Optional[List[str]] = None
    classes: Optional[List[NdcClass]] = None
    survey_type: Optional[str] = Field(
        None,
        description="Survey type, e.g. literature introduction, fact finding, holdings",
    )
    content_type: Optional[str] = Field(
        None, description="Content type, e.g. local history, people, words, place names"
    )
    bibls: Optional[List[Bibl]] = None
    answer_process: Optional[str] = None
    referrals: Optional[List[str]] = None
    pre_survey: Optional[str] = None
    note: Optional[str] = None
    questioner_type: Optional[str] = None
    contributors: Optional[List[str]] = None
    system: SystemInfo


class ManualResult(_Normalized):
    """Research guide."""

    type: Literal["manual"] = "manual"
    url: str
    theme: str
    registration_id: str
    guide: str
    created_at: str
    is_completed: bool
    keywords: Optional[List[str]] = None
    classes: Optional[List[NdcClass]] = None
    bibls: Optional[List[Bibl]] = None
    note: Optional[str] = None
    system: SystemInfo


class CollectionResult(_Normalized):
    """Special collection."""

    type: Literal["collection"] = "collection"
    url: str
    name: str
    name_kana: str
    registration_id: str
    content: str
    origin: Optional[str] = None
    restriction: Optional[str] = None
    catalog: Optional[str] = None
    literature: Optional[str] = None
    number: Optional[str] = Field(None, description="Number of items held")
    is_continued: bool
    keywords: Optional[List[str]] = None
    classes: Optional[List[NdcClass]] = None
    note: Optional[str] = None
    system: SystemInfo


class ProfileResult(_Normalized):
    """Participating library profile."""

    type: Literal["profile"] = "profile"
    url: str
    library_type: str = Field(..., description="Library type code")
    library_name: str
    library_name_kana: str
    library_name_abbr: str
    zip_code: str
    address_prefecture: str
    address_city: str
    address_street: str
    tel1: str
    tel1_note: Optional[str] = None
    tel2: Optional[str] = None
    tel2_note: Optional[str] = None
    tel3: Optional[str] = None
    tel3_note: Optional[str] = None
    fax: Optional[str] = None
    e_mail: Optional[str] = None
    homepage: Optional[str] = None
    open_info: Optional[str] = None
    restriction: Optional[str] = None
    outline: Optional[str] = None
    feature: Optional[str] = None
    notes: Optional[str] = None
    access: Optional[str] = None
    isil: Optional[str] = None
    system: ProfileSystemInfo


SearchResult = Annotated[
    Union[ReferenceResult, ManualResult, CollectionResult, ProfileResult],
    Field(discriminator="type"),
]


class SearchResponse(_Normalized):
    """Successful search outcome."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "hit_count": 1,
                "cursor_position": 1,
                "results_returned": 1,
                "results": [{"type": "profile", "library_name": "長野県立図書館"}],
            }
        },
    )

    hit_count: int = Field(..., ge=0)
    cursor_position: int
    results_returned: int
    results: List[SearchResult] = Field(default_factory=list)


__all__ = [
    "ProfileSystemInfo",
    "SystemInfo",
    "ReferenceResult",
    "ManualResult",
    "CollectionResult",
    "ProfileResult",
    "SearchResult",
    "SearchResponse",
]
