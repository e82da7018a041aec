"""Decide between a successful response and an upstream-reported error."""

from __future__ import annotations

import logging

from ..models.response import SearchResponse
from ..models.upstream import RawResultSet
from .errors import InvariantViolation, UpstreamApplicationError
from .mapper import map_result

logger = logging.getLogger(__name__)


def classify_result_set(result_set: RawResultSet) -> SearchResponse:
    """Turn a decoded result set into a SearchResponse or raise.

    Only the first upstream error entry is surfaced to the caller.

    Raises:
        UpstreamApplicationError: ``results_cd`` is nonzero and an error entry
            was reported.
        InvariantViolation: The response contradicts its own status code.
    """
    if result_set.results_cd != 0:
        if not result_set.err_list:
            logger.error(
                "CRD reported failure without error entries",
                extra={"results_cd": result_set.results_cd},
            )
            raise InvariantViolation(
                "nonzero results_cd without err_list",
                details={"results_cd": result_set.results_cd},
            )
        first = result_set.err_list[0]
        if len(result_set.err_list) > 1:
            logger.debug(
                "Discarding additional CRD error entries",
                extra={"discarded": len(result_set.err_list) - 1},
            )
        raise UpstreamApplicationError(first.err_code, first.err_fld, first.err_msg)

    if result_set.hit_num is None:
        raise InvariantViolation("results_cd is 0 but hit_num is missing")

    entries = result_set.result
    if entries is None:
        # zero hits, results_num=0 and a cursor past the last hit return no <result>
        if result_set.results_num != 0:
            raise InvariantViolation(
                "results_cd is 0 but result list is missing",
                details={
                    "hit_num": result_set.hit_num,
                    "results_num": result_set.results_num,
                },
            )
        entries = []

    return SearchResponse(
        hit_count=result_set.hit_num,
        cursor_position=result_set.results_get_position,
        results_returned=result_set.results_num,
        results=[map_result(entry) for entry in entries],
    )


__all__ = ["classify_result_set"]
