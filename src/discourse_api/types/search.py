from typing import Any

from discourse_api.types.base import DiscourseModel


class SearchPost(DiscourseModel):
    id: int
    name: str | None = None
    username: str
    avatar_template: str
    created_at: str
    like_count: int | None = None
    blurb: str
    post_number: int
    topic_id: int
    topic_title_headline: str | None = None


class SearchTopic(DiscourseModel):
    id: int
    title: str
    fancy_title: str | None = None
    slug: str
    posts_count: int | None = None
    category_id: int | None = None
    tags: list[str] | None = None
    closed: bool | None = None
    archived: bool | None = None


class GroupedSearchResult(DiscourseModel):
    more_posts: bool | None = None
    more_users: bool | None = None
    more_categories: bool | None = None
    term: str
    search_log_id: int | None = None
    more_full_page_results: bool | None = None
    can_create_topic: bool | None = None
    error: str | None = None
    extra: dict[str, Any] | None = None
    post_ids: list[int]
    user_ids: list[int]
    category_ids: list[int]
    tag_ids: list[int]
    group_ids: list[int]


class SearchResponse(DiscourseModel):
    posts: list[SearchPost]
    topics: list[SearchTopic] | None = None
    users: list[Any]
    categories: list[Any]
    tags: list[Any]
    groups: list[Any]
    grouped_search_result: GroupedSearchResult
