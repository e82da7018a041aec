"""Translate a SearchRequest into CRD query parameters."""

from __future__ import annotations

from typing import List, Tuple

from ..models.request import SearchRequest

# Condition attribute -> upstream parameter name, in emission order.
CONDITION_PARAMS: Tuple[Tuple[str, str], ...] = (
    ("query", "query"),
    ("crt_date_from", "crt-date_from"),
    ("crt_date_to", "crt-date_to"),
    ("reg_date_from", "reg-date_from"),
    ("reg_date_to", "reg-date_to"),
    ("lst_date_from", "lst-date_from"),
    ("lst_date_to", "lst-date_to"),
)


def build_query_params(request: SearchRequest) -> List[Tuple[str, str]]:
    """Return the ordered (name, value) pairs for a search request.

    ``type`` and ``results_num`` always come first, followed by the condition
    fields that are set, then the optional library filters and the cursor.
    """
    params: List[Tuple[str, str]] = [
        ("type", request.type.value),
        ("results_num", str(request.results_num)),
    ]

    condition = request.condition
    for attr, name in CONDITION_PARAMS:
        value = getattr(condition, attr)
        if value is not None:
            params.append((name, value))

    if request.lib_id is not None:
        params.append(("lib_id", request.lib_id))
    if request.lib_group is not None:
        params.append(("lib_group", request.lib_group.value))
    if request.results_get_position is not None:
        params.append(("results_get_position", str(request.results_get_position)))

    return params


__all__ = ["CONDITION_PARAMS", "build_query_params"]
