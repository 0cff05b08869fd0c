from discourse_api.resources.base import Resource
from discourse_api.types.search import SearchResponse


class Search(Resource):
    def search(self, page: int | None = None, q: str | None = None) -> SearchResponse:
        """Full-text search over posts, topics, users, categories and tags.

        ``q`` accepts the advanced search syntax, e.g.
        ``"api @blake #support tags:api after:2021-06-04 in:unseen"``.
        """
        return self.client.call("GET", "search.json", query={"page": page, "q": q}, response_model=SearchResponse)
