"""User accounts, the public directory and admin user management."""

from discourse_api.resources.base import Resource
from discourse_api.types.base import QueryParams
from discourse_api.types.enums import AdminListFlagOrder, AdminListOrder, Asc, Flag, ListPublicOrder, ListPublicPeriod
from discourse_api.types.users import (
    ActivateUserResponse,
    AdminGetUserResponse,
    AdminListUsersFlagResponse,
    AdminListUsersResponse,
    AnonymizeUserResponse,
    ChangePasswordRequestBody,
    CreateUserRequestBody,
    CreateUserResponse,
    DeactivateUserResponse,
    DeleteUserRequestBody,
    DeleteUserResponse,
    GetUserEmailsResponse,
    GetUserExternalIdResponse,
    GetUserIdentiyProviderExternalIdResponse,
    GetUserResponse,
    ListUserActionsResponse,
    ListUsersPublicResponse,
    LogOutUserResponse,
    RefreshGravatarResponse,
    SendPasswordResetEmailRequestBody,
    SendPasswordResetEmailResponse,
    SilenceUserRequestBody,
    SilenceUserResponse,
    SuspendUserRequestBody,
    SuspendUserResponse,
    UpdateAvatarRequestBody,
    UpdateAvatarResponse,
    UpdateEmailRequestBody,
    UpdateUsernameRequestBody,
    UpdateUserRequestBody,
    UpdateUserResponse,
)


class AdminListParams(QueryParams):
    asc: Asc | None = None
    email: str | None = None
    ip: str | None = None
    order: AdminListOrder | None = None
    page: int | None = None
    show_emails: bool | None = None
    stats: bool | None = None


class AdminListFlagParams(QueryParams):
    asc: Asc | None = None
    email: str | None = None
    flag: Flag
    ip: str | None = None
    order: AdminListFlagOrder | None = None
    page: int | None = None
    show_emails: bool | None = None
    stats: bool | None = None

    def to_query(self) -> list[tuple[str, str]]:
        # flag goes in the path
        return [(name, value) for name, value in super().to_query() if name != "flag"]


class Users(Resource):
    def create(self, body: CreateUserRequestBody | dict) -> CreateUserResponse:
        """Creates a user."""
        return self.client.call(
            "POST",
            "users.json",
            body=body,
            body_model=CreateUserRequestBody,
            response_model=CreateUserResponse,
        )

    def get(self, username: str) -> GetUserResponse:
        """Get a single user by username."""
        return self.client.call(
            "GET",
            "u/{username}.json",
            path_params={"username": username},
            response_model=GetUserResponse,
        )

    def update(self, username: str, body: UpdateUserRequestBody | dict) -> UpdateUserResponse:
        return self.client.call(
            "PUT",
            "u/{username}.json",
            path_params={"username": username},
            body=body,
            body_model=UpdateUserRequestBody,
            response_model=UpdateUserResponse,
        )

    def get_external_id(self, external_id: str) -> GetUserExternalIdResponse:
        """Get a user by the external id of the SSO provider."""
        return self.client.call(
            "GET",
            "u/by-external/{external_id}.json",
            path_params={"external_id": external_id},
            response_model=GetUserExternalIdResponse,
        )

    def get_identiy_provider_external_id(
        self, external_id: str, provider: str
    ) -> GetUserIdentiyProviderExternalIdResponse:
        """Get a user by identity provider external id."""
        return self.client.call(
            "GET",
            "u/by-external/{provider}/{external_id}.json",
            path_params={"provider": provider, "external_id": external_id},
            response_model=GetUserIdentiyProviderExternalIdResponse,
        )

    def update_avatar(self, username: str, body: UpdateAvatarRequestBody | dict) -> UpdateAvatarResponse:
        return self.client.call(
            "PUT",
            "u/{username}/preferences/avatar/pick.json",
            path_params={"username": username},
            body=body,
            body_model=UpdateAvatarRequestBody,
            response_model=UpdateAvatarResponse,
        )

    def update_email(self, username: str, body: UpdateEmailRequestBody | dict) -> None:
        self.client.call(
            "PUT",
            "u/{username}/preferences/email.json",
            path_params={"username": username},
            body=body,
            body_model=UpdateEmailRequestBody,
        )

    def update_username(self, username: str, body: UpdateUsernameRequestBody | dict) -> None:
        self.client.call(
            "PUT",
            "u/{username}/preferences/username.json",
            path_params={"username": username},
            body=body,
            body_model=UpdateUsernameRequestBody,
        )

    def list_public(
        self,
        order: ListPublicOrder,
        period: ListPublicPeriod,
        asc: Asc | None = None,
        page: int | None = None,
    ) -> ListUsersPublicResponse:
        """Get a public list of users (the user directory)."""
        return self.client.call(
            "GET",
            "directory_items.json",
            query={"order": order, "period": period, "asc": asc, "page": page},
            response_model=ListUsersPublicResponse,
        )

    def admin_get(self, id: int) -> AdminGetUserResponse:
        """Get a user by id, with the fields only staff can see."""
        return self.client.call(
            "GET",
            "admin/users/{id}.json",
            path_params={"id": id},
            response_model=AdminGetUserResponse,
        )

    def delete(self, id: int, body: DeleteUserRequestBody | dict) -> DeleteUserResponse:
        return self.client.call(
            "DELETE",
            "admin/users/{id}.json",
            path_params={"id": id},
            body=body,
            body_model=DeleteUserRequestBody,
            response_model=DeleteUserResponse,
        )

    def activate(self, id: int) -> ActivateUserResponse:
        return self.client.call(
            "PUT",
            "admin/users/{id}/activate.json",
            path_params={"id": id},
            response_model=ActivateUserResponse,
        )

    def deactivate(self, id: int) -> DeactivateUserResponse:
        return self.client.call(
            "PUT",
            "admin/users/{id}/deactivate.json",
            path_params={"id": id},
            response_model=DeactivateUserResponse,
        )

    def suspend(self, id: int, body: SuspendUserRequestBody | dict) -> SuspendUserResponse:
        return self.client.call(
            "PUT",
            "admin/users/{id}/suspend.json",
            path_params={"id": id},
            body=body,
            body_model=SuspendUserRequestBody,
            response_model=SuspendUserResponse,
        )

    def silence(self, id: int, body: SilenceUserRequestBody | dict) -> SilenceUserResponse:
        return self.client.call(
            "PUT",
            "admin/users/{id}/silence.json",
            path_params={"id": id},
            body=body,
            body_model=SilenceUserRequestBody,
            response_model=SilenceUserResponse,
        )

    def anonymize(self, id: int) -> AnonymizeUserResponse:
        return self.client.call(
            "PUT",
            "admin/users/{id}/anonymize.json",
            path_params={"id": id},
            response_model=AnonymizeUserResponse,
        )

    def log_out(self, id: int) -> LogOutUserResponse:
        """End every session of a user."""
        return self.client.call(
            "POST",
            "admin/users/{id}/log_out.json",
            path_params={"id": id},
            response_model=LogOutUserResponse,
        )

    def refresh_gravatar(self, username: str) -> RefreshGravatarResponse:
        return self.client.call(
            "POST",
            "user_avatar/{username}/refresh_gravatar.json",
            path_params={"username": username},
            response_model=RefreshGravatarResponse,
        )

    def admin_list(self, params: AdminListParams | None = None) -> list[AdminListUsersResponse]:
        """List users, staff only."""
        return self.client.call(
            "GET",
            "admin/users.json",
            query=params or AdminListParams(),
            response_model=AdminListUsersResponse,
            many=True,
        )

    def admin_list_flag(self, params: AdminListFlagParams) -> list[AdminListUsersFlagResponse]:
        """List users matching a flag such as ``active`` or ``suspended``."""
        return self.client.call(
            "GET",
            "admin/users/list/{flag}.json",
            path_params={"flag": params.flag},
            query=params,
            response_model=AdminListUsersFlagResponse,
            many=True,
        )

    def list_actions(self, filter: str, offset: int, username: str) -> ListUserActionsResponse:
        """Get a list of user actions.

        ``filter`` is a comma separated list of action type ids, e.g. ``"4,5"``
        for topics and replies.
        """
        return self.client.call(
            "GET",
            "user_actions.json",
            query={"filter": filter, "offset": offset, "username": username},
            response_model=ListUserActionsResponse,
        )

    def send_password_reset_email(
        self, body: SendPasswordResetEmailRequestBody | dict
    ) -> SendPasswordResetEmailResponse:
        return self.client.call(
            "POST",
            "session/forgot_password.json",
            body=body,
            body_model=SendPasswordResetEmailRequestBody,
            response_model=SendPasswordResetEmailResponse,
        )

    def change_password(self, token: str, body: ChangePasswordRequestBody | dict) -> None:
        """Set a new password using the token from a password reset email."""
        self.client.call(
            "PUT",
            "users/password-reset/{token}.json",
            path_params={"token": token},
            body=body,
            body_model=ChangePasswordRequestBody,
        )

    def get_emails(self, username: str) -> GetUserEmailsResponse:
        return self.client.call(
            "GET",
            "u/{username}/emails.json",
            path_params={"username": username},
            response_model=GetUserEmailsResponse,
        )
