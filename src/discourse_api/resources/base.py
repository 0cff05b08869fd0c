"""Common base for the per-tag API namespaces."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from discourse_api.client import Client


class Resource:
    """A group of endpoints sharing one Client."""

    def __init__(self, client: "Client"):
        self.client = client

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.client!r})"
