from datetime import datetime

from discourse_api.resources.base import Resource
from discourse_api.types.base import QueryParams
from discourse_api.types.calendar_events import ListEventsResponse
from discourse_api.types.enums import IncludeDetails, IncludeSubcategories, Order


class ListEventsParams(QueryParams):
    after: datetime | None = None
    attending_user: str | None = None
    before: datetime | None = None
    category_id: int | None = None
    include_details: IncludeDetails | None = None
    include_subcategories: IncludeSubcategories | None = None
    limit: int | None = None
    order: Order | None = None
    post_id: int | None = None


class ExportEventsIcsParams(QueryParams):
    after: datetime | None = None
    attending_user: str | None = None
    before: datetime | None = None
    category_id: int | None = None
    include_subcategories: IncludeSubcategories | None = None
    limit: int | None = None
    order: Order | None = None


class DiscourseCalendarEvents(Resource):
    """Events of the discourse-calendar plugin."""

    def list_events(self, params: ListEventsParams | None = None) -> ListEventsResponse:
        """List calendar events, optionally filtered by date range, category or attendee."""
        return self.client.call(
            "GET",
            "discourse-post-event/events.json",
            query=params or ListEventsParams(),
            response_model=ListEventsResponse,
        )

    def export_events_ics(self, params: ExportEventsIcsParams | None = None) -> str:
        """Export calendar events as an iCalendar document."""
        return self.client.call(
            "GET",
            "discourse-post-event/events.ics",
            query=params or ExportEventsIcsParams(),
            text=True,
        )
