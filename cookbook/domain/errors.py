"""Exceptions raised by the storage and cookbook domain.

Every error here is also a ``ValueError`` so callers that only guard against
bad input keep working. Not-found conditions are never errors: they come back
as ``None``, an empty list or ``RemoveOutcome.NOT_FOUND``.
"""


class CookbookError(ValueError):
    """Base class for rejected domain input."""


class InvalidCategoryError(CookbookError):
    def __init__(self, category):
        self.category = category
        super().__init__(f"Invalid category: {category}")


class InvalidRecipeNameError(CookbookError):
    def __init__(self, message: str = "Recipe name cannot be null or empty."):
        super().__init__(message)


class InvalidDateRangeError(CookbookError):
    pass


__all__ = ['CookbookError', 'InvalidCategoryError', 'InvalidRecipeNameError', 'InvalidDateRangeError']
