"""Interface for paginated list responses."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

import requests

Item = TypeVar("Item")


class Pagination(ABC, Generic[Item]):
    """A response page that knows how to request the page after it."""

    @abstractmethod
    def has_more_pages(self) -> bool:
        """Returns True if the response has more pages."""

    @abstractmethod
    def next_page_token(self) -> str | None:
        """Returns the continuation token of the next page."""

    @abstractmethod
    def next_page(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        """Modify a request to get the next page."""

    @abstractmethod
    def items(self) -> list[Item]:
        """Get the items from a page."""
