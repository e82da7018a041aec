"""FastMCP server exposing the CRD reference search tool."""

from __future__ import annotations

import json
import logging
import os
import sys
import time
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field, ValidationError

# Load environment variables from .env file
load_dotenv()

from ..models import Condition, LibGroup, SearchRequest, SearchType
from ..services import (
    CrdSearchService,
    DecodeError,
    InvariantViolation,
    TransportError,
    UpstreamApplicationError,
)
from ..services.config import get_config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

mcp = FastMCP(
    "crd-search",
    instructions=(
        "Search the Collaborative Reference Database (CRD) run by the National Diet Library: "
        "reference cases, research guides (manual), special collections and participating "
        "library profiles. 'query' uses CQL, e.g. 'question any 北海道' or "
        "'lib-name any 長野'. Dates are YYYYMMDD. At least one of query or the date bounds "
        "is required. When presenting results, always name the provider library. "
        "A rejected request fails with a JSON object carrying err_code, err_fld and err_msg."
    ),
)

crd_service = CrdSearchService()


def build_search_request(
    *,
    type: SearchType = SearchType.ALL,
    query: Optional[str] = None,
    crt_date_from: Optional[str] = None,
    crt_date_to: Optional[str] = None,
    reg_date_from: Optional[str] = None,
    reg_date_to: Optional[str] = None,
    lst_date_from: Optional[str] = None,
    lst_date_to: Optional[str] = None,
    lib_id: Optional[str] = None,
    lib_group: Optional[LibGroup] = None,
    results_get_position: Optional[int] = None,
    results_num: int = 100,
) -> SearchRequest:
    """Assemble a SearchRequest from flat tool arguments.

    Raises pydantic.ValidationError when no condition field is set or a bound
    is out of range.
    """
    condition = Condition(
        query=query,
        crt_date_from=crt_date_from,
        crt_date_to=crt_date_to,
        reg_date_from=reg_date_from,
        reg_date_to=reg_date_to,
        lst_date_from=lst_date_from,
        lst_date_to=lst_date_to,
    )
    return SearchRequest(
        type=type,
        condition=condition,
        lib_id=lib_id,
        lib_group=lib_group,
        results_get_position=results_get_position,
        results_num=results_num,
    )


@mcp.tool(
    name="search",
    description=(
        "Search the Collaborative Reference Database (CRD). "
        "When showing each record, also state its provider library name."
    ),
)
async def search(
    type: SearchType = Field(
        default=SearchType.ALL,
        description="Record type: reference, manual, collection, profile or all.",
    ),
    query: Optional[str] = Field(
        default=None,
        description="CQL query over record fields, e.g. 'question any 北海道'.",
    ),
    crt_date_from: Optional[str] = Field(default=None, description="Creation date from (YYYYMMDD)."),
    crt_date_to: Optional[str] = Field(default=None, description="Creation date to (YYYYMMDD)."),
    reg_date_from: Optional[str] = Field(
        default=None, description="Registration date from (YYYYMMDD)."
    ),
    reg_date_to: Optional[str] = Field(default=None, description="Registration date to (YYYYMMDD)."),
    lst_date_from: Optional[str] = Field(
        default=None, description="Last update date from (YYYYMMDD)."
    ),
    lst_date_to: Optional[str] = Field(default=None, description="Last update date to (YYYYMMDD)."),
    lib_id: Optional[str] = Field(
        default=None,
        description="Provider library code, exact match. Use query to search by library name.",
    ),
    lib_group: Optional[LibGroup] = Field(
        default=None,
        description="Library group: all, ndl, public, academic, special, school or archives.",
    ),
    results_get_position: Optional[int] = Field(
        default=None, ge=0, description="Position of the first result to return."
    ),
    results_num: int = Field(
        default=100, ge=0, le=100, description="Maximum results to return (0-100)."
    ),
) -> Dict[str, Any]:
    start_time = time.time()

    try:
        request = build_search_request(
            type=type,
            query=query,
            crt_date_from=crt_date_from,
            crt_date_to=crt_date_to,
            reg_date_from=reg_date_from,
            reg_date_to=reg_date_to,
            lst_date_from=lst_date_from,
            lst_date_to=lst_date_to,
            lib_id=lib_id,
            lib_group=lib_group,
            results_get_position=results_get_position,
            results_num=results_num,
        )
    except ValidationError as exc:
        raise ToolError(f"Invalid search request: {exc}") from exc

    try:
        result = await crd_service.search(request)
    except UpstreamApplicationError as exc:
        logger.warning(f"CRD rejected request: {exc}", extra=exc.details)
        payload = {"error": str(exc), **exc.to_dict()}
        raise ToolError(json.dumps(payload, ensure_ascii=False)) from exc
    except InvariantViolation as exc:
        logger.error(f"CRD contract violation: {exc.reason}", extra=exc.details)
        raise ToolError(exc.message) from exc
    except (TransportError, DecodeError) as exc:
        logger.error(f"CRD search failed: {exc.message}", extra=exc.details)
        raise ToolError(f"Internal error: {exc.message}") from exc

    duration_ms = (time.time() - start_time) * 1000
    logger.info(
        "MCP tool called",
        extra={
            "tool_name": "search",
            "type": request.type.value,
            "hit_count": result.hit_count,
            "result_count": len(result.results),
            "duration_ms": f"{duration_ms:.2f}",
        },
    )

    return result.model_dump(mode="json", exclude_none=True)


def main() -> None:
    config = get_config()
    logging.basicConfig(level=config.logging_level, format=LOG_FORMAT, stream=sys.stderr)

    transport = os.getenv("MCP_TRANSPORT", "stdio").strip().lower() or "stdio"

    # Configure HTTP transport with custom port if specified
    if transport == "http":
        port = int(os.getenv("MCP_PORT", "8001"))
        host = os.getenv("MCP_HOST", "127.0.0.1")
        logger.info(
            "Starting CRD MCP server",
            extra={"transport": transport, "host": host, "port": port},
        )
        mcp.run(transport=transport, host=host, port=port)
    else:
        logger.info("Starting CRD MCP server", extra={"transport": transport})
        mcp.run(transport=transport)


if __name__ == "__main__":
    main()
