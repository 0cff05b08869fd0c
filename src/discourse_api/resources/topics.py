from discourse_api.resources.base import Resource
from discourse_api.types.enums import LatestOrder, Period
from discourse_api.types.topics import (
    CreateTopicTimerRequestBody,
    CreateTopicTimerResponse,
    GetSpecificPostsFromTopicRequestBody,
    GetSpecificPostsFromTopicResponse,
    GetTopicResponse,
    InviteGroupToTopicRequestBody,
    InviteGroupToTopicResponse,
    InviteToTopicRequestBody,
    InviteToTopicResponse,
    ListLatestTopicsResponse,
    ListTopTopicsResponse,
    SetNotificationLevelRequestBody,
    SetNotificationLevelResponse,
    UpdateTopicRequestBody,
    UpdateTopicResponse,
    UpdateTopicStatusRequestBody,
    UpdateTopicStatusResponse,
    UpdateTopicTimestampRequestBody,
    UpdateTopicTimestampResponse,
)


class Topics(Resource):
    def get_specific_posts_from(
        self, id: str, body: GetSpecificPostsFromTopicRequestBody | dict
    ) -> GetSpecificPostsFromTopicResponse:
        """Get specific posts from a topic; the post ids travel in a GET body."""
        return self.client.call(
            "GET",
            "t/{id}/posts.json",
            path_params={"id": id},
            body=body,
            body_model=GetSpecificPostsFromTopicRequestBody,
            response_model=GetSpecificPostsFromTopicResponse,
        )

    def get(self, id: str) -> GetTopicResponse:
        """Get a single topic."""
        return self.client.call("GET", "t/{id}.json", path_params={"id": id}, response_model=GetTopicResponse)

    def remove(self, id: str) -> None:
        self.client.call("DELETE", "t/{id}.json", path_params={"id": id})

    def update(self, id: str, body: UpdateTopicRequestBody | dict) -> UpdateTopicResponse:
        """Change the title or category of a topic."""
        return self.client.call(
            "PUT",
            "t/-/{id}.json",
            path_params={"id": id},
            body=body,
            body_model=UpdateTopicRequestBody,
            response_model=UpdateTopicResponse,
        )

    def invite_to(self, id: str, body: InviteToTopicRequestBody | dict) -> InviteToTopicResponse:
        return self.client.call(
            "POST",
            "t/{id}/invite.json",
            path_params={"id": id},
            body=body,
            body_model=InviteToTopicRequestBody,
            response_model=InviteToTopicResponse,
        )

    def invite_group_to(self, id: str, body: InviteGroupToTopicRequestBody | dict) -> InviteGroupToTopicResponse:
        return self.client.call(
            "POST",
            "t/{id}/invite-group.json",
            path_params={"id": id},
            body=body,
            body_model=InviteGroupToTopicRequestBody,
            response_model=InviteGroupToTopicResponse,
        )

    def bookmark(self, id: str) -> None:
        self.client.call("PUT", "t/{id}/bookmark.json", path_params={"id": id})

    def update_status(self, id: str, body: UpdateTopicStatusRequestBody | dict) -> UpdateTopicStatusResponse:
        """Close, pin, archive or hide a topic, or undo it."""
        return self.client.call(
            "PUT",
            "t/{id}/status.json",
            path_params={"id": id},
            body=body,
            body_model=UpdateTopicStatusRequestBody,
            response_model=UpdateTopicStatusResponse,
        )

    def list_latest(
        self,
        ascending: str | None = None,
        order: LatestOrder | str | None = None,
        per_page: int | None = None,
    ) -> ListLatestTopicsResponse:
        """Get the latest topics.

        ``order`` names the sort column (``LatestOrder``); pass
        ``ascending="true"`` to reverse the default descending sort.
        """
        return self.client.call(
            "GET",
            "latest.json",
            query={"ascending": ascending, "order": order, "per_page": per_page},
            response_model=ListLatestTopicsResponse,
        )

    def list_top(self, per_page: int | None = None, period: Period | str | None = None) -> ListTopTopicsResponse:
        """Get the top topics filtered by period."""
        return self.client.call(
            "GET",
            "top.json",
            query={"per_page": per_page, "period": period},
            response_model=ListTopTopicsResponse,
        )

    def set_notification_level(
        self, id: str, body: SetNotificationLevelRequestBody | dict
    ) -> SetNotificationLevelResponse:
        return self.client.call(
            "POST",
            "t/{id}/notifications.json",
            path_params={"id": id},
            body=body,
            body_model=SetNotificationLevelRequestBody,
            response_model=SetNotificationLevelResponse,
        )

    def update_timestamp(self, id: str, body: UpdateTopicTimestampRequestBody | dict) -> UpdateTopicTimestampResponse:
        return self.client.call(
            "PUT",
            "t/{id}/change-timestamp.json",
            path_params={"id": id},
            body=body,
            body_model=UpdateTopicTimestampRequestBody,
            response_model=UpdateTopicTimestampResponse,
        )

    def create_timer(self, id: str, body: CreateTopicTimerRequestBody | dict) -> CreateTopicTimerResponse:
        return self.client.call(
            "POST",
            "t/{id}/timer.json",
            path_params={"id": id},
            body=body,
            body_model=CreateTopicTimerRequestBody,
            response_model=CreateTopicTimerResponse,
        )

    def get_by_external_id(self, external_id: str) -> None:
        """Resolve a topic by external id; the server answers with a redirect to it."""
        self.client.call("GET", "t/external_id/{external_id}.json", path_params={"external_id": external_id})
