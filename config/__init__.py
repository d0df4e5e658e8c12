"""Configuration package for the interview practice service."""
from .llm import LlmRoute, route_from_settings
from .settings import Settings, settings

__all__ = [
    "LlmRoute",
    "route_from_settings",
    "Settings",
    "settings",
]
