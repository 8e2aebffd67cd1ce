"""Default request and response handling for the HTTP adapter.

Each function here is the built-in counterpart of one configurable hook:
``build_params`` → :func:`build_query_params`, ``on_success`` →
:func:`success_result`, ``on_failure`` → :func:`failure_result`.
"""

from collections.abc import Callable, Mapping
from typing import Any

import httpx

from http_auth_adapter.result import Result, ResultCode

OnSuccessHook = Callable[[Any], Any]
OnFailureHook = Callable[[Exception], Any]
BuildParamsHook = Callable[[dict[str, Any]], Any]


def build_query_params(params: Mapping[str, Any]) -> httpx.QueryParams:
    """Serialise ``params`` into ordered query-string pairs, keeping insertion order."""
    return httpx.QueryParams(dict(params))


def decode_response(response: Any) -> Any:
    """Return the JSON body of ``response``, or its raw text if that is empty or not JSON."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if data:
        return data
    return getattr(response, "text", response)


def success_result(response: Any, identity: str | None) -> Result:
    return Result(ResultCode.SUCCESS, identity, decode_response(response))


def failure_result(error: Exception) -> Result:
    return Result(ResultCode.FAILURE, None, error)
