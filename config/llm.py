from __future__ import annotations  # Configuration schema for the completion endpoint

from typing import Dict

from pydantic import BaseModel, Field

from .settings import Settings


class LlmRoute(BaseModel):  # Completion endpoint configuration
    name: str = "ollama"
    base_url: str
    endpoint: str = "/api/generate"
    model: str
    timeout_s: float = Field(default=180.0, ge=0.1)
    extra_headers: Dict[str, str] = Field(default_factory=dict)

    @property
    def url(self) -> str:  # Full generate URL
        return f"{self.base_url.rstrip('/')}{self.endpoint}"


def route_from_settings(cfg: Settings) -> LlmRoute:  # Build the default route from application settings
    return LlmRoute(
        base_url=cfg.OLLAMA_API_URL,
        model=cfg.OLLAMA_MODEL,
        timeout_s=cfg.LLM_TIMEOUT_S,
    )
