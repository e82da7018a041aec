"""Pydantic models for requests, raw upstream records and normalized results."""

from .request import CONDITION_FIELDS, Condition, LibGroup, SearchRequest, SearchType
from .response import (
    CollectionResult,
    ManualResult,
    ProfileResult,
    ProfileSystemInfo,
    ReferenceResult,
    SearchResponse,
    SearchResult,
    SystemInfo,
)
from .upstream import (
    Bibl,
    ErrorEntry,
    NdcClass,
    RawCollection,
    RawManual,
    RawProfile,
    RawProfileSystemInfo,
    RawReference,
    RawResult,
    RawResultSet,
    RawSystemInfo,
)

__all__ = [
    "CONDITION_FIELDS",
    "Condition",
    "LibGroup",
    "SearchRequest",
    "SearchType",
    "Bibl",
    "ErrorEntry",
    "NdcClass",
    "RawCollection",
    "RawManual",
    "RawProfile",
    "RawProfileSystemInfo",
    "RawReference",
    "RawResult",
    "RawResultSet",
    "RawSystemInfo",
    "CollectionResult",
    "ManualResult",
    "ProfileResult",
    "ProfileSystemInfo",
    "ReferenceResult",
    "SearchResponse",
    "SearchResult",
    "SystemInfo",
]
