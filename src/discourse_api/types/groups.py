from typing import Any

from discourse_api.types.base import DiscourseModel


class Group(DiscourseModel):
    """Group attributes accepted when creating or updating a group."""

    name: str
    full_name: str | None = None
    bio_raw: str | None = None
    usernames: str | None = None  # comma separated
    owner_usernames: str | None = None  # comma separated
    automatic_membership_email_domains: str | None = None  # pipe separated
    visibility_level: int | None = None
    primary_group: bool | None = None
    flair_icon: str | None = None
    flair_upload_id: int | None = None
    flair_bg_color: str | None = None
    public_admission: bool | None = None
    public_exit: bool | None = None
    default_notification_level: int | None = None
    muted_category_ids: list[int] | None = None
    regular_category_ids: list[int] | None = None
    watching_category_ids: list[int] | None = None
    tracking_category_ids: list[int] | None = None
    watching_first_post_category_ids: list[int] | None = None


class CreateGroupRequestBody(DiscourseModel):
    group: Group


class BasicGroup(DiscourseModel):
    id: int
    automatic: bool | None = None
    name: str
    user_count: int | None = None
    mentionable_level: int | None = None
    messageable_level: int | None = None
    visibility_level: int | None = None
    primary_group: bool | None = None
    title: str | None = None
    grant_trust_level: int | None = None
    incoming_email: str | None = None
    has_messages: bool | None = None
    flair_url: str | None = None
    flair_bg_color: str | None = None
    flair_color: str | None = None
    bio_raw: str | None = None
    bio_cooked: str | None = None
    bio_excerpt: str | None = None
    public_admission: bool | None = None
    public_exit: bool | None = None
    allow_membership_requests: bool | None = None
    full_name: str | None = None
    default_notification_level: int | None = None
    membership_request_template: str | None = None
    members_visibility_level: int | None = None
    can_see_members: bool | None = None
    can_admin_group: bool | None = None
    publish_read_state: bool | None = None


class CreateGroupResponse(DiscourseModel):
    basic_group: BasicGroup


class DeleteGroupResponse(DiscourseModel):
    success: str


class GroupDetail(BasicGroup):
    is_group_user: bool | None = None
    is_group_owner: bool | None = None
    is_group_owner_display: bool | None = None
    mentionable: bool | None = None
    messageable: bool | None = None
    automatic_membership_email_domains: str | None = None
    smtp_updated_at: str | None = None
    smtp_updated_by: Any | None = None
    smtp_enabled: bool | None = None
    smtp_server: str | None = None
    smtp_port: int | None = None
    smtp_ssl_mode: int | None = None
    imap_enabled: bool | None = None
    imap_updated_at: str | None = None
    imap_updated_by: Any | None = None
    email_username: str | None = None
    email_from_alias: str | None = None
    email_password: str | None = None
    imap_server: str | None = None
    imap_port: int | None = None
    imap_ssl: bool | None = None
    imap_mailbox_name: str | None = None
    imap_mailboxes: list[Any] | None = None
    email_domain: str | None = None
    can_edit_group: bool | None = None
    message_count: int | None = None
    allow_unknown_sender_topic_replies: bool | None = None
    associated_group_ids: list[Any] | None = None
    watching_category_ids: list[int] | None = None
    tracking_category_ids: list[int] | None = None
    watching_first_post_category_ids: list[int] | None = None
    regular_category_ids: list[int] | None = None
    muted_category_ids: list[int] | None = None
    watching_tags: list[Any] | None = None
    watching_first_post_tags: list[Any] | None = None
    tracking_tags: list[Any] | None = None
    regular_tags: list[Any] | None = None
    muted_tags: list[Any] | None = None


class GroupExtras(DiscourseModel):
    visible_group_names: list[str]


class GetGroupResponse(DiscourseModel):
    group: GroupDetail
    extras: GroupExtras | None = None


class UpdateGroupRequestBody(DiscourseModel):
    group: Group


class UpdateGroupResponse(DiscourseModel):
    success: str


class GetGroupByIdResponse(DiscourseModel):
    group: GroupDetail
    extras: GroupExtras | None = None


class GroupMember(DiscourseModel):
    id: int
    username: str
    name: str | None = None
    avatar_template: str
    title: str | None = None
    last_posted_at: str | None = None
    last_seen_at: str | None = None
    added_at: str | None = None
    timezone: str | None = None
    primary_group_name: str | None = None
    flair_name: str | None = None


class ListGroupMembersMeta(DiscourseModel):
    total: int
    limit: int
    offset: int


class ListGroupMembersResponse(DiscourseModel):
    members: list[GroupMember]
    owners: list[GroupMember]
    meta: ListGroupMembersMeta


class AddGroupMembersRequestBody(DiscourseModel):
    usernames: str | None = None  # comma separated


class AddGroupMembersResponse(DiscourseModel):
    success: str
    usernames: list[Any] | None = None
    emails: list[Any] | None = None


class RemoveGroupMembersRequestBody(DiscourseModel):
    usernames: str | None = None  # comma separated


class RemoveGroupMembersResponse(DiscourseModel):
    success: str
    usernames: list[Any] | None = None
    skipped_usernames: list[Any] | None = None


class ListGroupsExtras(DiscourseModel):
    type_filters: list[Any] | None = None


class ListGroupsResponse(DiscourseModel):
    groups: list[GroupDetail]
    extras: ListGroupsExtras | None = None
    total_rows_groups: int
    load_more_groups: str | None = None
