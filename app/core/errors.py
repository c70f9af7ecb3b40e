from __future__ import annotations


class SentimentPipelineError(Exception):
    """Base class for errors raised by the sentiment pipeline."""


class EmptyInputError(SentimentPipelineError):
    """Raw text is empty or whitespace-only; nothing was analyzed."""

    def __init__(self, message: str = "Input text must not be empty."):
        super().__init__(message)


class PipelineFailure(SentimentPipelineError):
    """A pipeline stage failed unexpectedly. Not retried by the core."""

    def __init__(self, stage: str, message: str | None = None):
        self.stage = stage
        super().__init__(message or f"Sentiment pipeline failed at stage '{stage}'.")
