"""Topic detail, topic listings and topic administration bodies."""

from typing import Any

from discourse_api.types.base import DiscourseModel
from discourse_api.types.common import ActionSummary, BasicUser, Post, PrimaryGroup, TopicList
from discourse_api.types.enums import Enabled, NotificationLevel, UpdateTopicStatusRequestBodyStatus


class GetSpecificPostsFromTopicRequestBody(DiscourseModel):
    post_ids: int


class TopicPost(Post):
    """A post as embedded in a topic's post stream."""

    link_counts: list[Any] | None = None
    read: bool | None = None
    user_suspended: bool | None = None


class PostStream(DiscourseModel):
    posts: list[TopicPost]
    stream: list[int] | None = None


class GetSpecificPostsFromTopicResponse(DiscourseModel):
    post_stream: PostStream
    id: int


class SuggestedTopicPoster(DiscourseModel):
    extras: str | None = None
    description: str
    user: BasicUser


class SuggestedTopic(DiscourseModel):
    id: int
    title: str
    fancy_title: str
    slug: str
    posts_count: int
    reply_count: int | None = None
    highest_post_number: int | None = None
    image_url: str | None = None
    created_at: str
    last_posted_at: str | None = None
    bumped: bool | None = None
    bumped_at: str | None = None
    archetype: str
    unseen: bool | None = None
    pinned: bool | None = None
    unpinned: bool | None = None
    excerpt: str | None = None
    visible: bool | None = None
    closed: bool | None = None
    archived: bool | None = None
    bookmarked: bool | None = None
    liked: bool | None = None
    tags: list[Any] | None = None
    tags_descriptions: dict[str, Any] | None = None
    like_count: int | None = None
    views: int | None = None
    category_id: int | None = None
    featured_link: str | None = None
    posters: list[SuggestedTopicPoster] | None = None


class Participant(DiscourseModel):
    id: int
    username: str
    name: str | None = None
    avatar_template: str
    post_count: int
    primary_group_name: str | None = None
    flair_name: str | None = None
    flair_url: str | None = None
    flair_color: str | None = None
    flair_bg_color: str | None = None
    flair_group_id: int | None = None
    admin: bool | None = None
    moderator: bool | None = None
    trust_level: int | None = None


class CreatedBy(DiscourseModel):
    id: int
    username: str
    name: str | None = None
    avatar_template: str


class LastPoster(DiscourseModel):
    id: int
    username: str
    name: str | None = None
    avatar_template: str


class Details(DiscourseModel):
    can_edit: bool | None = None
    notification_level: int
    can_move_posts: bool | None = None
    can_delete: bool | None = None
    can_remove_allowed_users: bool | None = None
    can_create_post: bool | None = None
    can_reply_as_new_topic: bool | None = None
    can_invite_to: bool | None = None
    can_invite_via_email: bool | None = None
    can_flag_topic: bool | None = None
    can_convert_topic: bool | None = None
    can_review_topic: bool | None = None
    can_close_topic: bool | None = None
    can_archive_topic: bool | None = None
    can_split_merge_topic: bool | None = None
    can_edit_staff_notes: bool | None = None
    can_toggle_topic_visibility: bool | None = None
    can_pin_unpin_topic: bool | None = None
    can_moderate_category: bool | None = None
    can_remove_self_id: int | None = None
    participants: list[Participant] | None = None
    created_by: CreatedBy
    last_poster: LastPoster


class Thumbnail(DiscourseModel):
    max_width: int | None = None
    max_height: int | None = None
    width: int
    height: int
    url: str


class GetTopicResponse(DiscourseModel):
    post_stream: PostStream
    timeline_lookup: list[Any] | None = None
    suggested_topics: list[SuggestedTopic] | None = None
    tags: list[Any] | None = None
    tags_descriptions: dict[str, Any] | None = None
    id: int
    title: str
    fancy_title: str
    posts_count: int
    created_at: str
    views: int
    reply_count: int
    like_count: int
    last_posted_at: str | None = None
    visible: bool
    closed: bool
    archived: bool
    has_summary: bool | None = None
    archetype: str
    slug: str
    category_id: int | None = None
    word_count: int | None = None
    deleted_at: str | None = None
    user_id: int
    featured_link: str | None = None
    pinned_globally: bool | None = None
    pinned_at: str | None = None
    pinned_until: str | None = None
    image_url: str | None = None
    slow_mode_seconds: int | None = None
    draft: str | None = None
    draft_key: str | None = None
    draft_sequence: int | None = None
    unpinned: bool | None = None
    pinned: bool | None = None
    current_post_number: int | None = None
    highest_post_number: int | None = None
    deleted_by: Any | None = None
    has_deleted: bool | None = None
    actions_summary: list[ActionSummary] | None = None
    chunk_size: int | None = None
    bookmarked: bool | None = None
    bookmarks: list[Any] | None = None
    topic_timer: Any | None = None
    message_bus_last_id: int | None = None
    participant_count: int | None = None
    show_read_indicator: bool | None = None
    thumbnails: list[Thumbnail] | None = None
    slow_mode_enabled_until: str | None = None
    summarizable: bool | None = None
    details: Details


class UpdateTopicRequestBodyTopic(DiscourseModel):
    title: str | None = None
    category_id: int | None = None


class UpdateTopicRequestBody(DiscourseModel):
    topic: UpdateTopicRequestBodyTopic | None = None


class BasicTopic(DiscourseModel):
    id: int
    title: str
    fancy_title: str | None = None
    slug: str
    posts_count: int | None = None


class UpdateTopicResponse(DiscourseModel):
    basic_topic: BasicTopic


class InviteToTopicRequestBody(DiscourseModel):
    user: str | None = None
    email: str | None = None


class InviteToTopicResponse(DiscourseModel):
    user: BasicUser


class InviteGroupToTopicRequestBody(DiscourseModel):
    group: str | None = None  # group name
    should_notify: bool | None = None


class InvitedGroup(DiscourseModel):
    id: int
    name: str


class InviteGroupToTopicResponse(DiscourseModel):
    group: InvitedGroup


class UpdateTopicStatusRequestBody(DiscourseModel):
    status: UpdateTopicStatusRequestBodyStatus
    enabled: Enabled
    until: str | None = None  # only for pinned topics, e.g. "2030-12-31"


class UpdateTopicStatusResponse(DiscourseModel):
    success: str
    topic_status_update: Any | None = None


class ListLatestTopicsResponse(DiscourseModel):
    users: list[BasicUser] | None = None
    primary_groups: list[PrimaryGroup] | None = None
    topic_list: TopicList


class ListTopTopicsResponse(DiscourseModel):
    users: list[BasicUser] | None = None
    primary_groups: list[PrimaryGroup] | None = None
    topic_list: TopicList


class SetNotificationLevelRequestBody(DiscourseModel):
    notification_level: NotificationLevel


class SetNotificationLevelResponse(DiscourseModel):
    success: str


class UpdateTopicTimestampRequestBody(DiscourseModel):
    timestamp: str


class UpdateTopicTimestampResponse(DiscourseModel):
    success: str


class CreateTopicTimerRequestBody(DiscourseModel):
    time: str | None = None
    status_type: str | None = None
    based_on_last_post: bool | None = None
    category_id: int | None = None


class CreateTopicTimerResponse(DiscourseModel):
    success: str
    execute_at: str | None = None
    duration_minutes: int | None = None
    based_on_last_post: bool | None = None
    closed: bool | None = None
    category_id: int | None = None
