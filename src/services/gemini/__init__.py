from .client import DEFAULT_FALLBACK, GeminiClient, extract_text, get_gemini_client
from .exceptions import (
    ProviderError,
    ProviderRateLimited,
    ProviderUnavailable,
    ProviderUnknownError,
)

__all__ = [
    "DEFAULT_FALLBACK",
    "GeminiClient",
    "extract_text",
    "get_gemini_client",
    "ProviderError",
    "ProviderRateLimited",
    "ProviderUnavailable",
    "ProviderUnknownError",
]
