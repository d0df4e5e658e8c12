from __future__ import annotations  # Re-export llm_gateway public API

from .llm_gateway import (
    CompletionClient,
    CompletionOptions,
    CompletionUnavailable,
    HttpClient,
    HttpResponse,
    LlmGatewayError,
    complete,
)

__all__ = [
    "CompletionClient",
    "CompletionOptions",
    "CompletionUnavailable",
    "HttpClient",
    "HttpResponse",
    "LlmGatewayError",
    "complete",
]
