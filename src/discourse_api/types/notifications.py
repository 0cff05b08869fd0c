from discourse_api.types.base import DiscourseModel


class NotificationData(DiscourseModel):
    """Free-form payload; which keys are present depends on notification_type."""

    badge_id: int | None = None
    badge_name: str | None = None
    badge_slug: str | None = None
    badge_title: bool | None = None
    username: str | None = None
    display_username: str | None = None
    original_post_id: int | None = None
    original_post_type: int | None = None
    original_username: str | None = None
    revision_number: int | None = None
    topic_title: str | None = None
    message: str | None = None
    group_id: int | None = None
    group_name: str | None = None


class Notification(DiscourseModel):
    id: int
    user_id: int | None = None
    notification_type: int
    read: bool
    high_priority: bool | None = None
    created_at: str
    post_number: int | None = None
    topic_id: int | None = None
    fancy_title: str | None = None
    slug: str | None = None
    data: NotificationData | None = None


class GetNotificationsResponse(DiscourseModel):
    notifications: list[Notification]
    total_rows_notifications: int | None = None
    seen_notification_id: int | None = None
    load_more_notifications: str | None = None


class MarkNotificationsAsReadRequestBody(DiscourseModel):
    id: int | None = None  # mark a single notification, all when omitted


class MarkNotificationsAsReadResponse(DiscourseModel):
    success: str
