"""
Utilities Package

Query normalization and response envelopes used by every route.
"""

from app.utils.query import (
    normalize_query,
    build_pagination,
    NormalizedQuery,
)

from app.utils.responses import (
    success_response,
    error_response,
    unauthorized_response,
    forbidden_response,
    not_found_response,
    validation_error_response,
    server_error_response,
    handle_api_error,
)

__all__ = [
    'normalize_query',
    'build_pagination',
    'NormalizedQuery',
    'success_response',
    'error_response',
    'unauthorized_response',
    'forbidden_response',
    'not_found_response',
    'validation_error_response',
    'server_error_response',
    'handle_api_error',
]
