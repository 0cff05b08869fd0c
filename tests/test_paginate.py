import pytest
import requests

from discourse_api.types import TopicList, TopicListItem
from discourse_api.types.paginate import Pagination


class LatestTopicsPage(Pagination[TopicListItem]):
    """Walks latest.json through the more_topics_url of each page."""

    def __init__(self, topic_list: TopicList):
        self.topic_list = topic_list

    def has_more_pages(self) -> bool:
        return self.topic_list.more_topics_url is not None

    def next_page_token(self) -> str | None:
        return self.topic_list.more_topics_url

    def next_page(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        request.prepare_url("https://forum.example.com" + self.next_page_token(), None)
        return request

    def items(self) -> list[TopicListItem]:
        return self.topic_list.topics


class TestPagination:
    def test_cannot_instantiate_interface(self):
        with pytest.raises(TypeError):
            Pagination()

    def test_implementation(self):
        page = LatestTopicsPage(TopicList(topics=[], more_topics_url="/latest?page=1"))
        request = requests.Request("GET", "https://forum.example.com/latest.json").prepare()
        assert page.has_more_pages()
        assert page.next_page(request).url == "https://forum.example.com/latest?page=1"
        assert page.items() == []

    def test_last_page(self):
        page = LatestTopicsPage(TopicList(topics=[]))
        assert not page.has_more_pages()
        assert page.next_page_token() is None
