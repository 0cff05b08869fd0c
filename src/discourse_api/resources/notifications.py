from discourse_api.resources.base import Resource
from discourse_api.types.notifications import (
    GetNotificationsResponse,
    MarkNotificationsAsReadRequestBody,
    MarkNotificationsAsReadResponse,
)


class Notifications(Resource):
    def get(self) -> GetNotificationsResponse:
        """Notifications of the user the token belongs to."""
        return self.client.call("GET", "notifications.json", response_model=GetNotificationsResponse)

    def mark_as_read(self, body: MarkNotificationsAsReadRequestBody | dict) -> MarkNotificationsAsReadResponse:
        return self.client.call(
            "PUT",
            "notifications/mark-read.json",
            body=body,
            body_model=MarkNotificationsAsReadRequestBody,
            response_model=MarkNotificationsAsReadResponse,
        )
