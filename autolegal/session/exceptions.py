class SessionError(Exception):
    """Base for caller-side checks that stop an analysis before it starts."""

    kind = "session"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingDocumentsError(SessionError):
    """Raised when analysis is requested with no staged documents."""

    kind = "missing_documents"


class AcknowledgmentRequiredError(SessionError):
    """Raised when the user has not confirmed the vehicle has no restrictions."""

    kind = "acknowledgment_required"


class AnalysisInProgressError(SessionError):
    """Raised when a second analysis is requested while one is outstanding."""

    kind = "analysis_in_progress"
