"""Service layer: request encoding, response decoding and the CRD client."""

from .classifier import classify_result_set
from .config import AppConfig, get_config, reload_config
from .crd_client import CrdSearchService
from .decoder import decode_result_set
from .encoder import build_query_params
from .errors import (
    CrdServiceError,
    DecodeError,
    InvariantViolation,
    TransportError,
    UpstreamApplicationError,
)
from .mapper import map_result

__all__ = [
    "AppConfig",
    "get_config",
    "reload_config",
    "build_query_params",
    "decode_result_set",
    "map_result",
    "classify_result_set",
    "CrdSearchService",
    "CrdServiceError",
    "TransportError",
    "DecodeError",
    "UpstreamApplicationError",
    "InvariantViolation",
]
