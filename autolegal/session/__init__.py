from autolegal.session.audit_session import AuditSession
from autolegal.session.exceptions import (
    AcknowledgmentRequiredError,
    AnalysisInProgressError,
    MissingDocumentsError,
    SessionError,
)

__all__ = [
    "AcknowledgmentRequiredError",
    "AnalysisInProgressError",
    "AuditSession",
    "MissingDocumentsError",
    "SessionError",
]
