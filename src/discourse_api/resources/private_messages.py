from discourse_api.resources.base import Resource
from discourse_api.types.private_messages import (
    GetUserSentPrivateMessagesResponse,
    ListUserPrivateMessagesResponse,
)


class PrivateMessages(Resource):
    def list_user(self, username: str) -> ListUserPrivateMessagesResponse:
        """List the private messages a user received."""
        return self.client.call(
            "GET",
            "topics/private-messages/{username}.json",
            path_params={"username": username},
            response_model=ListUserPrivateMessagesResponse,
        )

    def get_user_sent(self, username: str) -> GetUserSentPrivateMessagesResponse:
        """List the private messages a user sent."""
        return self.client.call(
            "GET",
            "topics/private-messages-sent/{username}.json",
            path_params={"username": username},
            response_model=GetUserSentPrivateMessagesResponse,
        )
