"""User accounts, the public directory and admin user management."""

from typing import Any

from pydantic import ConfigDict, Field

from discourse_api.types.base import DiscourseModel
from discourse_api.types.enums import UpdateAvatarRequestBodyType


class UserFields(DiscourseModel):
    """Custom user field values keyed by field id."""

    field_1: bool | None = Field(default=None, alias="1")


class ExternalIds(DiscourseModel):
    """External ids keyed by authentication provider name."""

    model_config = ConfigDict(extra="allow")


class CreateUserRequestBody(DiscourseModel):
    name: str
    email: str
    password: str
    username: str
    active: bool | None = None  # only honoured for admin api keys
    approved: bool | None = None
    user_fields: UserFields | None = None
    external_ids: ExternalIds | None = None


class CreateUserResponse(DiscourseModel):
    success: bool
    active: bool
    message: str
    user_id: int | None = None


class UserGroup(DiscourseModel):
    id: int
    automatic: bool | None = None
    name: str
    display_name: str | None = None
    user_count: int | None = None
    mentionable_level: int | None = None
    messageable_level: int | None = None
    visibility_level: int | None = None
    primary_group: bool | None = None
    title: str | None = None
    grant_trust_level: int | None = None
    flair_url: str | None = None
    flair_bg_color: str | None = None
    flair_color: str | None = None
    bio_cooked: str | None = None
    full_name: str | None = None
    default_notification_level: int | None = None


class UserOption(DiscourseModel):
    user_id: int
    mailing_list_mode: bool | None = None
    email_digests: bool | None = None
    email_level: int | None = None
    email_messages_level: int | None = None
    external_links_in_new_tab: bool | None = None
    dark_scheme_id: int | None = None
    dynamic_favicon: bool | None = None
    enable_quoting: bool | None = None
    enable_defer: bool | None = None
    digest_after_minutes: int | None = None
    automatically_unpin_topics: bool | None = None
    auto_track_topics_after_msecs: int | None = None
    notification_level_when_replying: int | None = None
    new_topic_duration_minutes: int | None = None
    like_notification_frequency: int | None = None
    include_tl0_in_digests: bool | None = None
    theme_ids: list[int] | None = None
    theme_key_seq: int | None = None
    allow_private_messages: bool | None = None
    enable_allowed_pm_users: bool | None = None
    homepage_id: int | None = None
    hide_profile_and_presence: bool | None = None
    text_size: str | None = None
    text_size_seq: int | None = None
    title_count_mode: str | None = None
    timezone: str | None = None
    skip_new_user_tips: bool | None = None


class UserDetail(DiscourseModel):
    id: int
    username: str
    name: str | None = None
    avatar_template: str
    email: str | None = None
    secondary_emails: list[Any] | None = None
    unconfirmed_emails: list[Any] | None = None
    last_posted_at: str | None = None
    last_seen_at: str | None = None
    created_at: str
    ignored: bool | None = None
    muted: bool | None = None
    can_ignore_user: bool | None = None
    can_mute_user: bool | None = None
    can_send_private_messages: bool | None = None
    can_send_private_message_to_user: bool | None = None
    trust_level: int
    moderator: bool
    admin: bool
    title: str | None = None
    badge_count: int | None = None
    user_fields: dict[str, Any] | None = None
    custom_fields: dict[str, Any] | None = None
    time_read: int | None = None
    recent_time_read: int | None = None
    primary_group_id: int | None = None
    primary_group_name: str | None = None
    flair_group_id: int | None = None
    flair_name: str | None = None
    flair_url: str | None = None
    flair_bg_color: str | None = None
    flair_color: str | None = None
    featured_topic: Any | None = None
    staged: bool | None = None
    can_edit: bool | None = None
    can_edit_username: bool | None = None
    can_edit_email: bool | None = None
    can_edit_name: bool | None = None
    uploaded_avatar_id: int | None = None
    has_title_badges: bool | None = None
    pending_count: int | None = None
    pending_posts_count: int | None = None
    profile_view_count: int | None = None
    second_factor_enabled: bool | None = None
    can_upload_profile_header: bool | None = None
    can_upload_user_card_background: bool | None = None
    post_count: int | None = None
    can_be_deleted: bool | None = None
    can_delete_all_posts: bool | None = None
    locale: str | None = None
    muted_category_ids: list[int] | None = None
    regular_category_ids: list[int] | None = None
    watched_tags: list[Any] | None = None
    watching_first_post_tags: list[Any] | None = None
    tracked_tags: list[Any] | None = None
    muted_tags: list[Any] | None = None
    tracked_category_ids: list[int] | None = None
    watched_category_ids: list[int] | None = None
    watched_first_post_category_ids: list[int] | None = None
    system_avatar_upload_id: int | None = None
    system_avatar_template: str | None = None
    muted_usernames: list[Any] | None = None
    ignored_usernames: list[Any] | None = None
    allowed_pm_usernames: list[Any] | None = None
    mailing_list_posts_per_day: int | None = None
    can_change_bio: bool | None = None
    can_change_location: bool | None = None
    can_change_website: bool | None = None
    can_change_tracking_preferences: bool | None = None
    user_api_keys: Any | None = None
    user_auth_tokens: list[Any] | None = None
    user_notification_schedule: dict[str, Any] | None = None
    use_logo_small_as_avatar: bool | None = None
    sidebar_tags: list[Any] | None = None
    sidebar_category_ids: list[int] | None = None
    display_sidebar_tags: bool | None = None
    invited_by: Any | None = None
    groups: list[UserGroup] | None = None
    group_users: list[dict[str, Any]] | None = None
    user_option: UserOption | None = None


class GetUserResponse(DiscourseModel):
    user_badges: list[Any]
    user: UserDetail


class UpdateUserRequestBody(DiscourseModel):
    name: str | None = None
    external_ids: ExternalIds | None = None


class UpdateUserResponse(DiscourseModel):
    success: str
    user: dict[str, Any]


class GetUserExternalIdResponse(DiscourseModel):
    user: UserDetail


class GetUserIdentiyProviderExternalIdResponse(DiscourseModel):
    user: UserDetail


class UpdateAvatarRequestBody(DiscourseModel):
    upload_id: int
    type_: UpdateAvatarRequestBodyType = Field(alias="type")


class UpdateAvatarResponse(DiscourseModel):
    success: str


class UpdateEmailRequestBody(DiscourseModel):
    email: str


class UpdateUsernameRequestBody(DiscourseModel):
    new_username: str


class DirectoryUser(DiscourseModel):
    id: int
    username: str
    name: str | None = None
    avatar_template: str
    title: str | None = None


class DirectoryItem(DiscourseModel):
    id: int
    likes_received: int
    likes_given: int
    topics_entered: int
    topic_count: int
    post_count: int
    posts_read: int
    days_visited: int
    user: DirectoryUser


class DirectoryMeta(DiscourseModel):
    last_updated_at: str | None = None
    total_rows_directory_items: int
    load_more_directory_items: str


class ListUsersPublicResponse(DiscourseModel):
    directory_items: list[DirectoryItem]
    meta: DirectoryMeta


class PenaltyCounts(DiscourseModel):
    silenced: int
    suspended: int


class ActingUser(DiscourseModel):
    id: int
    username: str
    name: str | None = None
    avatar_template: str


class AdminGetUserResponse(DiscourseModel):
    id: int
    username: str
    name: str | None = None
    avatar_template: str
    active: bool
    admin: bool
    moderator: bool
    last_seen_at: str | None = None
    last_emailed_at: str | None = None
    created_at: str
    last_seen_age: float | None = None
    last_emailed_age: float | None = None
    created_at_age: float | None = None
    trust_level: int
    manual_locked_trust_level: int | None = None
    title: str | None = None
    time_read: int | None = None
    staged: bool | None = None
    days_visited: int | None = None
    posts_read_count: int | None = None
    topics_entered: int | None = None
    post_count: int | None = None
    can_send_activation_email: bool | None = None
    can_activate: bool | None = None
    can_deactivate: bool | None = None
    ip_address: str | None = None
    registration_ip_address: str | None = None
    can_grant_admin: bool | None = None
    can_revoke_admin: bool | None = None
    can_grant_moderation: bool | None = None
    can_revoke_moderation: bool | None = None
    can_impersonate: bool | None = None
    like_count: int | None = None
    like_given_count: int | None = None
    topic_count: int | None = None
    flags_given_count: int | None = None
    flags_received_count: int | None = None
    private_topics_count: int | None = None
    can_delete_all_posts: bool | None = None
    can_be_deleted: bool | None = None
    can_be_anonymized: bool | None = None
    can_be_merged: bool | None = None
    full_suspend_reason: str | None = None
    silence_reason: str | None = None
    primary_group_id: int | None = None
    badge_count: int | None = None
    warnings_received_count: int | None = None
    bounce_score: float | None = None
    reset_bounce_score_after: str | None = None
    can_view_action_logs: bool | None = None
    can_disable_second_factor: bool | None = None
    can_delete_sso_record: bool | None = None
    api_key_count: int | None = None
    similar_users_count: int | None = None
    single_sign_on_record: Any | None = None
    approved_by: ActingUser | None = None
    suspended_by: ActingUser | None = None
    silenced_by: ActingUser | None = None
    penalty_counts: PenaltyCounts | None = None
    next_penalty: str | None = None
    tl3_requirements: dict[str, Any] | None = None
    groups: list[Any] | None = None
    external_ids: dict[str, Any] | None = None


class DeleteUserRequestBody(DiscourseModel):
    delete_posts: bool | None = None
    block_email: bool | None = None
    block_urls: bool | None = None
    block_ip: bool | None = None


class DeleteUserResponse(DiscourseModel):
    deleted: bool


class ActivateUserResponse(DiscourseModel):
    success: str


class DeactivateUserResponse(DiscourseModel):
    success: str


class SuspendUserRequestBody(DiscourseModel):
    suspend_until: str
    reason: str
    message: str | None = None  # emailed to the user
    post_action: str | None = None


class Suspension(DiscourseModel):
    suspend_reason: str
    full_suspend_reason: str
    suspended_till: str
    suspended_at: str
    suspended_by: ActingUser


class SuspendUserResponse(DiscourseModel):
    suspension: Suspension


class SilenceUserRequestBody(DiscourseModel):
    silenced_till: str
    reason: str
    message: str | None = None  # emailed to the user
    post_action: str | None = None


class Silence(DiscourseModel):
    silenced: bool
    silence_reason: str
    silenced_till: str
    silenced_at: str
    silenced_by: ActingUser


class SilenceUserResponse(DiscourseModel):
    silence: Silence


class AnonymizeUserResponse(DiscourseModel):
    success: str
    username: str


class LogOutUserResponse(DiscourseModel):
    success: str


class RefreshGravatarResponse(DiscourseModel):
    gravatar_upload_id: int | None = None
    gravatar_avatar_template: str | None = None


class AdminListUsersResponse(DiscourseModel):
    id: int
    username: str
    name: str | None = None
    avatar_template: str
    email: str | None = None
    secondary_emails: list[Any] | None = None
    active: bool
    admin: bool
    moderator: bool
    last_seen_at: str | None = None
    last_emailed_at: str | None = None
    created_at: str
    last_seen_age: float | None = None
    last_emailed_age: float | None = None
    created_at_age: float | None = None
    trust_level: int
    manual_locked_trust_level: int | None = None
    title: str | None = None
    time_read: int | None = None
    staged: bool | None = None
    days_visited: int | None = None
    posts_read_count: int | None = None
    topics_entered: int | None = None
    post_count: int | None = None


class AdminListUsersFlagResponse(AdminListUsersResponse):
    pass


class UserAction(DiscourseModel):
    excerpt: str | None = None
    action_type: int
    created_at: str
    avatar_template: str | None = None
    acting_avatar_template: str | None = None
    slug: str | None = None
    topic_id: int | None = None
    target_user_id: int | None = None
    target_name: str | None = None
    target_username: str | None = None
    post_number: int | None = None
    post_id: int | None = None
    username: str | None = None
    name: str | None = None
    user_id: int | None = None
    acting_username: str | None = None
    acting_name: str | None = None
    acting_user_id: int | None = None
    title: str | None = None
    deleted: bool | None = None
    hidden: bool | None = None
    post_type: int | None = None
    action_code: str | None = None
    category_id: int | None = None
    closed: bool | None = None
    archived: bool | None = None


class ListUserActionsResponse(DiscourseModel):
    user_actions: list[UserAction]


class SendPasswordResetEmailRequestBody(DiscourseModel):
    login: str  # username or email


class SendPasswordResetEmailResponse(DiscourseModel):
    success: str
    user_found: bool


class ChangePasswordRequestBody(DiscourseModel):
    username: str
    password: str


class GetUserEmailsResponse(DiscourseModel):
    email: str
    secondary_emails: list[Any]
    unconfirmed_emails: list[Any]
    associated_accounts: list[Any]
