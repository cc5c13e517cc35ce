"""
Error taxonomy for the card catalog.

FetchFailure never leaves the catalog cache; QueryError subclasses carry the
message shown to the user by the HTML views.
"""


class CatalogError(Exception):
    """Base class for all catalog errors"""


class FetchFailure(CatalogError):
    """The upstream card feed could not be fetched or decoded"""


class QueryError(CatalogError):
    """A search that has a user-facing explanation instead of results"""

    message = "Your search could not be completed."

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class EmptyQuery(QueryError):
    message = "No search query provided."


class NoResults(QueryError):
    message = "No matching cards found."
