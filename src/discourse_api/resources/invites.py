from discourse_api.resources.base import Resource
from discourse_api.types.invites import (
    CreateInviteRequestBody,
    CreateInviteResponse,
    CreateMultipleInvitesRequestBody,
    CreateMultipleInvitesResponse,
)


class Invites(Resource):
    def create(self, body: CreateInviteRequestBody | dict) -> CreateInviteResponse:
        """Create an invite link, or email an invite when ``email`` is set."""
        return self.client.call(
            "POST",
            "invites.json",
            body=body,
            body_model=CreateInviteRequestBody,
            response_model=CreateInviteResponse,
        )

    def create_multiple(self, body: CreateMultipleInvitesRequestBody | dict) -> CreateMultipleInvitesResponse:
        return self.client.call(
            "POST",
            "invites/create-multiple.json",
            body=body,
            body_model=CreateMultipleInvitesRequestBody,
            response_model=CreateMultipleInvitesResponse,
        )
