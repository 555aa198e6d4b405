"""Domain exceptions raised by the records repository and service layers.

Controllers never let these escape: they are caught and turned into error
envelopes by `ApiResponseBuilder.create_error_response`.
"""


class PortfolioError(Exception):
    """Base exception for portfolio backend errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


class UnknownCategoryError(PortfolioError, ValueError):
    """A record category other than `experience` or `education` was used."""


class CategoryMismatchError(PortfolioError):
    """A service method was called for a category it was not built for."""
