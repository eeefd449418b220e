class AnalysisError(Exception):
    """Base for every failure of a single analysis call.

    ``message`` is safe to show to the user as is.
    """

    kind = "analysis"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(AnalysisError):
    """Raised when the API credential is missing before any network attempt."""

    kind = "configuration"


class AuthenticationError(AnalysisError):
    """Raised when the model provider rejects the API credential."""

    kind = "authentication"


class ResourceUnavailableError(AnalysisError):
    """Raised when the requested model is not found or not enabled for the key."""

    kind = "resource_unavailable"


class BillingError(AnalysisError):
    """Raised when the provider account has no billing enabled."""

    kind = "billing"


class EmptyResponseError(AnalysisError):
    """Raised when the model answered without any usable text."""

    kind = "empty_response"


class TransportError(AnalysisError):
    """Raised for any other network or runtime failure of the model call."""

    kind = "transport"


class PromptLoadError(Exception):
    """Raised when a bundled prompt file cannot be read."""
