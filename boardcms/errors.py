"""Domain exceptions for content access and CLI diagnostics."""

from __future__ import annotations


class ContentStageError(RuntimeError):
    """Raised when a specific content operation stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped content error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class ContentValidationError(ContentStageError):
    """Raised when a normalized document is rejected by its validator."""

    def __init__(self, *, key: str, locale: str, message: str) -> None:
        super().__init__(
            stage="validate",
            detail=message,
            hint=f"Fix `{key}` ({locale}) and submit the full document again.",
        )
        self.key = key
        self.locale = locale
        self.message = message


class UnknownContentKeyError(ContentStageError, KeyError):
    """Raised for content keys without a registered normalizer/validator pair."""

    def __init__(self, key: str) -> None:
        super().__init__(
            stage="content",
            detail=f"Unsupported content key `{key}`.",
            hint="Use one of: page.home, page.services, page.amenities, page.contact, page.reservation.",
        )
        self.key = key

    def __str__(self) -> str:
        return self.detail


class HotelOperationError(ContentStageError):
    """Raised when a hotel entity operation is rejected."""

    def __init__(self, detail: str, hint: str | None = None) -> None:
        super().__init__(stage="hotel", detail=detail, hint=hint)


class HotelNotFoundError(HotelOperationError):
    """Raised when a hotel or one of its gallery images does not exist."""


class DuplicateSlugError(HotelOperationError):
    """Raised when a hotel slug is already used by another hotel."""
