from discourse_api.types.base import DiscourseModel
from discourse_api.types.common import Post


class LatestPost(Post):
    topic_title: str | None = None
    topic_html_title: str | None = None
    category_id: int | None = None


class ListPostsResponse(DiscourseModel):
    latest_posts: list[LatestPost]


class CreateTopicPostPMRequestBody(DiscourseModel):
    """Creates a topic when title is set, a reply when topic_id is set,
    and a private message when archetype is ``private_message``."""

    title: str | None = None
    raw: str
    topic_id: int | None = None
    category: int | None = None
    target_recipients: str | None = None  # comma separated usernames or group names
    target_usernames: str | None = None  # deprecated alias of target_recipients
    archetype: str | None = None
    created_at: str | None = None
    reply_to_post_number: int | None = None
    embed_url: str | None = None
    external_id: str | None = None
    auto_track: bool | None = None


class CreateTopicPostPMResponse(Post):
    draft_sequence: int | None = None


class GetPostResponse(Post):
    pass


class UpdatePostRequestBodyPost(DiscourseModel):
    raw: str
    edit_reason: str | None = None


class UpdatePostRequestBody(DiscourseModel):
    post: UpdatePostRequestBodyPost | None = None


class UpdatePostResponse(DiscourseModel):
    post: Post


class DeletePostRequestBody(DiscourseModel):
    force_destroy: bool | None = None


class ReplyToUser(DiscourseModel):
    username: str
    name: str | None = None
    avatar_template: str


class PostRepliesResponse(Post):
    reply_to_user: ReplyToUser | None = None


class LockPostRequestBody(DiscourseModel):
    locked: str


class LockPostResponse(DiscourseModel):
    locked: bool


class PerformPostActionRequestBody(DiscourseModel):
    id: int
    post_action_type_id: int  # 2 is a like
    flag_topic: bool | None = None


class PerformPostActionResponse(Post):
    pass
