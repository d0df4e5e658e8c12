from __future__ import annotations  # Completion request gateway module

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

import httpx

from config import LlmRoute


logger = logging.getLogger(__name__)  # Module logger setup


class HttpClient(Protocol):  # Minimal HTTP client protocol
    def post(self, url: str, *, json: Dict[str, Any], headers: Dict[str, str], timeout: float) -> "HttpResponse": ...


class HttpResponse(Protocol):  # Minimal HTTP response protocol
    @property
    def status_code(self) -> int: ...

    def json(self) -> Any: ...

    @property
    def text(self) -> str: ...


class LlmGatewayError(RuntimeError):  # Base gateway error
    pass


class CompletionUnavailable(LlmGatewayError):  # Endpoint failed, timed out or returned an unusable payload
    pass


@dataclass(frozen=True)
class CompletionOptions:  # Sampling options forwarded to the model
    temperature: float = 0.7
    max_tokens: int = 500

    def as_payload(self) -> Dict[str, Any]:
        return {"temperature": self.temperature, "num_predict": self.max_tokens}


def complete(
    prompt: str,
    *,
    cfg: LlmRoute,
    options: Optional[CompletionOptions] = None,
    client: Optional[HttpClient] = None,
) -> str:  # Send one generate request and return the raw completion text
    opts = options or CompletionOptions()
    payload: Dict[str, Any] = {
        "model": cfg.model,
        "prompt": prompt,
        "stream": False,
        "options": opts.as_payload(),
    }
    headers = {"Content-Type": "application/json"}
    headers.update(cfg.extra_headers)
    preview = _preview(prompt)
    logger.info(
        "LLM request start route=%s model=%s temperature=%s num_predict=%d preview=%s",
        cfg.name,
        cfg.model,
        opts.temperature,
        opts.max_tokens,
        preview,
    )
    close_cb: Optional[Callable[[], None]] = None
    try:
        try:
            response, close_cb = _post(cfg.url, payload, headers, cfg.timeout_s, client)
        except Exception as exc:  # noqa: BLE001
            logger.error("LLM transport failure: %s", exc)
            raise CompletionUnavailable("LLM transport failed") from exc
        if not 200 <= response.status_code < 300:
            logger.error("LLM error status: %s", response.status_code)
            raise CompletionUnavailable(f"LLM returned status {response.status_code}")
        try:
            data = response.json()
        except Exception as exc:  # noqa: BLE001
            logger.error("Invalid JSON payload from LLM: %s", exc)
            raise CompletionUnavailable("LLM payload was not JSON") from exc
        text = _extract_response(data)
    finally:
        _close_safely(close_cb)
    logger.info("LLM request done route=%s model=%s chars=%d", cfg.name, cfg.model, len(text))
    return text


class CompletionClient:  # Completion client bound to one route and transport
    def __init__(self, route: LlmRoute, *, http_client: Optional[HttpClient] = None) -> None:
        self._route = route
        self._http_client = http_client

    @property
    def route(self) -> LlmRoute:
        return self._route

    def complete(self, prompt: str, options: Optional[CompletionOptions] = None) -> str:
        return complete(prompt, cfg=self._route, options=options, client=self._http_client)


def _post(url: str, payload: Dict[str, Any], headers: Dict[str, str], timeout: float, client: Optional[HttpClient]) -> Tuple[HttpResponse, Optional[Callable[[], None]]]:  # Dispatch HTTP request
    if client is not None:
        response = client.post(url, json=payload, headers=headers, timeout=timeout)
        return response, None
    http_client = httpx.Client(timeout=timeout)
    try:
        response = http_client.post(url, json=payload, headers=headers)
    except Exception:
        http_client.close()
        raise
    return response, http_client.close


def _close_safely(close_cb: Optional[Callable[[], None]]) -> None:  # Close HTTP client callback when provided
    if close_cb is not None:
        close_cb()


def _preview(prompt: str) -> str:  # Build preview string for logging
    for line in prompt.splitlines():
        text = line.strip()
        if text:
            return text if len(text) <= 120 else text[:117] + "..."
    return ""


def _extract_response(data: Any) -> str:  # Extract generated text from the generate payload
    if isinstance(data, dict) and isinstance(data.get("response"), str):
        return data["response"]
    logger.error("LLM payload missing response field")
    raise CompletionUnavailable("LLM response missing content")
