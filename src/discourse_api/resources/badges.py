from discourse_api.resources.base import Resource
from discourse_api.types.badges import (
    AdminListBadgesResponse,
    CreateBadgeRequestBody,
    CreateBadgeResponse,
    ListUserBadgesResponse,
    UpdateBadgeRequestBody,
    UpdateBadgeResponse,
)


class Badges(Resource):
    def admin_list(self) -> AdminListBadgesResponse:
        """List badges."""
        return self.client.call("GET", "admin/badges.json", response_model=AdminListBadgesResponse)

    def create(self, body: CreateBadgeRequestBody | dict) -> CreateBadgeResponse:
        return self.client.call(
            "POST",
            "admin/badges.json",
            body=body,
            body_model=CreateBadgeRequestBody,
            response_model=CreateBadgeResponse,
        )

    def update(self, id: int, body: UpdateBadgeRequestBody | dict) -> UpdateBadgeResponse:
        return self.client.call(
            "PUT",
            "admin/badges/{id}.json",
            path_params={"id": id},
            body=body,
            body_model=UpdateBadgeRequestBody,
            response_model=UpdateBadgeResponse,
        )

    def delete(self, id: int) -> None:
        self.client.call("DELETE", "admin/badges/{id}.json", path_params={"id": id})

    def list_user(self, username: str) -> ListUserBadgesResponse:
        """List the badges granted to a user."""
        return self.client.call(
            "GET",
            "user-badges/{username}.json",
            path_params={"username": username},
            response_model=ListUserBadgesResponse,
        )
