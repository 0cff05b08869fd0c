"""Closed enumerations used by request bodies and query parameters."""

from discourse_api.types.base import DiscourseEnum


class Asc(DiscourseEnum):
    """Ascending sort flag for user listings."""

    TRUE = "true"


class Order(DiscourseEnum):
    """Sort order for calendar events by start date."""

    ASC = "asc"
    DESC = "desc"


class IncludeDetails(DiscourseEnum):
    TRUE = "true"
    FALSE = "false"


class IncludeSubcategories(DiscourseEnum):
    TRUE = "true"
    FALSE = "false"


class EventStatus(DiscourseEnum):
    """Visibility of a calendar event."""

    PUBLIC = "public"
    PRIVATE = "private"
    STANDALONE = "standalone"


class ListPublicOrder(DiscourseEnum):
    LIKES_RECEIVED = "likes_received"
    LIKES_GIVEN = "likes_given"
    TOPIC_COUNT = "topic_count"
    POST_COUNT = "post_count"
    TOPICS_ENTERED = "topics_entered"
    POSTS_READ = "posts_read"
    DAYS_VISITED = "days_visited"


class ListPublicPeriod(DiscourseEnum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"
    ALL = "all"


class AdminListOrder(DiscourseEnum):
    CREATED = "created"
    LAST_EMAILED = "last_emailed"
    SEEN = "seen"
    USERNAME = "username"
    EMAIL = "email"
    TRUST_LEVEL = "trust_level"
    DAYS_VISITED = "days_visited"
    POSTS_READ = "posts_read"
    TOPICS_VIEWED = "topics_viewed"
    POSTS = "posts"
    READ_TIME = "read_time"


class AdminListFlagOrder(DiscourseEnum):
    CREATED = "created"
    LAST_EMAILED = "last_emailed"
    SEEN = "seen"
    USERNAME = "username"
    EMAIL = "email"
    TRUST_LEVEL = "trust_level"
    DAYS_VISITED = "days_visited"
    POSTS_READ = "posts_read"
    TOPICS_VIEWED = "topics_viewed"
    POSTS = "posts"
    READ_TIME = "read_time"


class Flag(DiscourseEnum):
    """Admin user list filter."""

    ACTIVE = "active"
    NEW = "new"
    STAFF = "staff"
    SUSPENDED = "suspended"
    BLOCKED = "blocked"
    SUSPECT = "suspect"


class NotificationLevel(DiscourseEnum):
    """Topic notification level: muted, regular, tracking, watching."""

    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"


class Enabled(DiscourseEnum):
    TRUE = "true"
    FALSE = "false"


class UpdateTopicStatusRequestBodyStatus(DiscourseEnum):
    CLOSED = "closed"
    PINNED = "pinned"
    PINNED_GLOBALLY = "pinned_globally"
    ARCHIVED = "archived"
    VISIBLE = "visible"


class Type(DiscourseEnum):
    """Purpose of an uploaded file."""

    AVATAR = "avatar"
    PROFILE_BACKGROUND = "profile_background"
    CARD_BACKGROUND = "card_background"
    CUSTOM_EMOJI = "custom_emoji"
    COMPOSER = "composer"


class UploadType(DiscourseEnum):
    AVATAR = "avatar"
    PROFILE_BACKGROUND = "profile_background"
    CARD_BACKGROUND = "card_background"
    CUSTOM_EMOJI = "custom_emoji"
    COMPOSER = "composer"


class UpdateAvatarRequestBodyType(DiscourseEnum):
    UPLOADED = "uploaded"
    CUSTOM = "custom"
    GRAVATAR = "gravatar"
    SYSTEM = "system"


class LatestOrder(DiscourseEnum):
    """Sort column for the latest topics listing."""

    DEFAULT = "default"
    CREATED = "created"
    ACTIVITY = "activity"
    VIEWS = "views"
    POSTS = "posts"
    CATEGORY = "category"
    LIKES = "likes"
    OP_LIKES = "op_likes"
    POSTERS = "posters"


class Period(DiscourseEnum):
    """Window for the top topics listing."""

    ALL = "all"
    YEARLY = "yearly"
    QUARTERLY = "quarterly"
    MONTHLY = "monthly"
    WEEKLY = "weekly"
    DAILY = "daily"
