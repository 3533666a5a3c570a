"""Exceptions raised while rendering templates."""

from __future__ import annotations


class TemplateRenderError(Exception):
    """Base exception for rendering failures."""


class MissingFieldError(TemplateRenderError, ValueError):
    """A required input field is empty."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class MissingNameError(MissingFieldError):
    def __init__(self) -> None:
        super().__init__("name", "name can't be empty")


class MissingImageURLError(MissingFieldError):
    def __init__(self) -> None:
        super().__init__("image_url", "imageURL can't be empty")


class TemplateError(TemplateRenderError):
    """Template text failed to parse or to execute.

    ``stage`` is ``"parse"`` or ``"execute"``.  The underlying fault is
    available as ``__cause__``: a ``ValueError`` for parse failures, a
    ``KeyError`` for a missing field at execute time.
    """

    def __init__(self, stage: str, detail: str) -> None:
        super().__init__(f"unable to {stage} template: {detail}")
        self.stage = stage
