"""Errors surfaced by the evaluation pipeline to its callers."""


class PipelineError(Exception):
    """Base class for caller-visible pipeline failures."""


class NoDocumentContentError(PipelineError):
    """The caller supplied nothing to evaluate."""

    def __init__(self, message: str = "No document content provided") -> None:
        super().__init__(message)


class EvaluationFailedError(PipelineError):
    """An unexpected failure inside the rule stages."""

    def __init__(self, message: str = "Failed to process document") -> None:
        super().__init__(message)


class EvaluationParseError(ValueError):
    """Model output did not contain a usable JSON object.

    Raised and recovered inside the evaluation adapter; never reaches callers.
    """
