"""Errors raised by the layout engine and its collaborators.

``SurfaceNotFoundError`` is usually handled where it is raised (a missing
surface means "create it"). ``ContextUnavailableError`` is retryable once
the next relayout has created the surface. Anything else that goes wrong
during a pass reaches the host as ``LayoutPassError``; bad settings raise
``ConfigurationError``.
"""

from typing import Any, Optional


class LazyPanesError(Exception):
    """Root of the lazypanes errors.

    Keyword arguments other than ``retryable`` are kept in ``context`` and
    appended to the message, e.g. ``Unknown surface (panel='files')``.
    """

    def __init__(self, message: str, *, retryable: bool = False, **context: Any) -> None:
        self.message = message
        self.context = context
        self.retryable = retryable
        details = ", ".join(f"{key}={value!r}" for key, value in context.items())
        super().__init__(f"{message} ({details})" if details else message)


class SurfaceNotFoundError(LazyPanesError):
    """The rendering backend has no surface with the requested name."""

    def __init__(
        self,
        message: str = "Unknown surface",
        *,
        panel: Optional[str] = None,
        **context: Any,
    ) -> None:
        if panel:
            context["panel"] = panel
        self.panel = panel
        super().__init__(message, **context)


class ContextUnavailableError(LazyPanesError):
    """A context cannot be focused because its surface does not exist yet.

    Retry after the next relayout pass has created the surface.
    """

    def __init__(
        self,
        message: str = "Context surface not created yet",
        *,
        context_key: Optional[str] = None,
        panel: Optional[str] = None,
        **context: Any,
    ) -> None:
        if context_key:
            context["context_key"] = context_key
        if panel:
            context["panel"] = panel
        super().__init__(message, retryable=True, **context)


class LayoutPassError(LazyPanesError):
    """A relayout pass was aborted.

    Surfaces updated earlier in the same pass are left as they are; the next
    externally triggered relayout is the retry.
    """

    def __init__(
        self,
        message: str = "Relayout pass failed",
        *,
        step: Optional[str] = None,
        **context: Any,
    ) -> None:
        if step:
            context["step"] = step
        super().__init__(message, **context)


class ConfigurationError(LazyPanesError):
    """Settings file or environment contains an invalid value."""

    def __init__(
        self,
        message: str = "Invalid configuration",
        *,
        key: Optional[str] = None,
        **context: Any,
    ) -> None:
        if key:
            context["key"] = key
        super().__init__(message, **context)
