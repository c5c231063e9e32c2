"""SkillLens error taxonomy.

Every error carries the user-facing message and the HTTP status the
gateway answers with. Causes are chained with ``raise ... from exc`` and
logged where they are caught; the message itself stays generic.
"""

from __future__ import annotations


class SkillLensError(Exception):
    message = "Unexpected error"
    status_code = 500

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class InvalidInputError(SkillLensError):
    status_code = 400
    message = "Invalid input"


class MissingInputError(InvalidInputError):
    """Job description or skill list left blank."""
    message = "Please fill in both fields before analyzing."


class ExtractionError(SkillLensError):
    """The language model call or its response handling failed."""
    message = "Failed to analyze job"


class AnalysisFailedError(SkillLensError):
    """The client could not get an answer from the gateway."""
    status_code = 502
    message = "Analysis failed. Check server console/network tab."


class UnexpectedResponseError(SkillLensError):
    """The gateway answered, but not with two skill lists."""
    status_code = 502
    message = "API returned an unexpected data format."
