"""Shared pieces for the search provider adapters."""

POPUP_QUERY_SUFFIX = "팝업스토어"


class ProviderNotConfiguredError(Exception):
    """Raised when a provider is called without its credentials."""

    def __init__(self, provider: str):
        super().__init__(f"{provider} credentials are not configured")
        self.provider = provider


def popup_query(query: str, suffix: str = POPUP_QUERY_SUFFIX) -> str:
    """Append the domain suffix term to a free-text query."""
    if not suffix:
        return query
    return f"{query} {suffix}"
