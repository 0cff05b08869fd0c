"""Calendar events published by the discourse-calendar plugin."""

from typing import Any

from discourse_api.types.base import DiscourseModel
from discourse_api.types.common import BasicUser
from discourse_api.types.enums import EventStatus


class EventTopic(DiscourseModel):
    id: int
    title: str


class EventPost(DiscourseModel):
    id: int
    post_number: int
    url: str
    topic: EventTopic


class EventStats(DiscourseModel):
    going: int | None = None
    interested: int | None = None
    not_going: int | None = None
    invited: int | None = None


class Event(DiscourseModel):
    id: int
    starts_at: str
    ends_at: str | None = None
    timezone: str | None = None
    name: str | None = None
    description: str | None = None
    location: str | None = None
    url: str | None = None
    category_id: int | None = None
    status: EventStatus | None = None
    show_local_time: bool | None = None
    recurrence: str | None = None
    recurrence_until: str | None = None
    rrule: str | None = None
    is_expired: bool | None = None
    is_ongoing: bool | None = None
    is_public: bool | None = None
    is_private: bool | None = None
    is_standalone: bool | None = None
    post: EventPost
    creator: BasicUser | None = None
    stats: EventStats | None = None
    sample_invitees: list[Any] | None = None
    watching_invitee: Any | None = None
    can_act_on_discourse_post_event: bool | None = None
    can_update_attendance: bool | None = None


class ListEventsResponse(DiscourseModel):
    events: list[Event]
