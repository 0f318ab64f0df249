"""
Failure classes surfaced by the Gemini client.
"""


class ProviderError(Exception):
    """Base class for generation failures."""


class ProviderUnavailable(ProviderError):
    """The provider reported it is temporarily overloaded."""


class ProviderRateLimited(ProviderError):
    """The provider rejected the call for exceeding the rate limit."""

    def __init__(self, retry_after: str):
        super().__init__(f"Rate limited, retry after {retry_after}")
        self.retry_after = retry_after


class ProviderUnknownError(ProviderError):
    """Any other failure, including a missing credential."""
