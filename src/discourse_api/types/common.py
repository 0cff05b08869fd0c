"""Records embedded in more than one response: users, posters, topic lists, posts."""

from typing import Any

from discourse_api.types.base import DiscourseModel


class BasicUser(DiscourseModel):
    id: int
    username: str
    name: str | None = None
    avatar_template: str


class Poster(DiscourseModel):
    """A participant shown next to a topic in a topic list."""

    extras: str | None = None
    description: str
    user_id: int
    primary_group_id: int | None = None
    flair_group_id: int | None = None


class TopicListItem(DiscourseModel):
    id: int
    title: str
    fancy_title: str
    slug: str
    posts_count: int
    reply_count: int
    highest_post_number: int
    image_url: str | None = None
    created_at: str
    last_posted_at: str | None = None
    bumped: bool | None = None
    bumped_at: str | None = None
    archetype: str
    unseen: bool | None = None
    last_read_post_number: int | None = None
    unread_posts: int | None = None
    pinned: bool | None = None
    unpinned: bool | None = None
    visible: bool | None = None
    closed: bool | None = None
    archived: bool | None = None
    notification_level: int | None = None
    bookmarked: bool | None = None
    liked: bool | None = None
    views: int | None = None
    like_count: int | None = None
    has_summary: bool | None = None
    last_poster_username: str | None = None
    category_id: int | None = None
    op_like_count: int | None = None
    pinned_globally: bool | None = None
    featured_link: str | None = None
    tags: list[str] | None = None
    posters: list[Poster] | None = None


class TopicList(DiscourseModel):
    can_create_topic: bool | None = None
    more_topics_url: str | None = None
    draft: str | None = None
    draft_key: str | None = None
    draft_sequence: int | None = None
    per_page: int | None = None
    top_tags: list[str] | None = None
    topics: list[TopicListItem]


class ActionSummary(DiscourseModel):
    """Count of one post action type; id 2 is a like."""

    id: int
    count: int | None = None
    hidden: bool | None = None
    can_act: bool | None = None
    acted: bool | None = None
    can_undo: bool | None = None


class Post(DiscourseModel):
    """Fields common to every post representation."""

    id: int
    name: str | None = None
    username: str
    avatar_template: str
    created_at: str
    cooked: str | None = None
    post_number: int
    post_type: int
    updated_at: str | None = None
    reply_count: int | None = None
    reply_to_post_number: int | None = None
    quote_count: int | None = None
    incoming_link_count: int | None = None
    reads: int | None = None
    readers_count: int | None = None
    score: float | None = None
    yours: bool | None = None
    topic_id: int
    topic_slug: str | None = None
    display_username: str | None = None
    primary_group_name: str | None = None
    flair_name: str | None = None
    flair_url: str | None = None
    flair_bg_color: str | None = None
    flair_color: str | None = None
    flair_group_id: int | None = None
    version: int | None = None
    can_edit: bool | None = None
    can_delete: bool | None = None
    can_recover: bool | None = None
    can_see_hidden_post: bool | None = None
    can_wiki: bool | None = None
    user_title: str | None = None
    bookmarked: bool | None = None
    raw: str | None = None
    actions_summary: list[ActionSummary] | None = None
    moderator: bool | None = None
    admin: bool | None = None
    staff: bool | None = None
    user_id: int | None = None
    hidden: bool | None = None
    trust_level: int | None = None
    deleted_at: str | None = None
    user_deleted: bool | None = None
    edit_reason: str | None = None
    can_view_edit_history: bool | None = None
    wiki: bool | None = None
    reviewable_id: int | None = None
    reviewable_score_count: int | None = None
    reviewable_score_pending_count: int | None = None
    mentioned_users: list[Any] | None = None


class PrimaryGroup(DiscourseModel):
    id: int
    name: str
    flair_url: str | None = None
    flair_bg_color: str | None = None
    flair_color: str | None = None
