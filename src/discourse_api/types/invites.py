from typing import Any

from discourse_api.types.base import DiscourseModel


class CreateInviteRequestBody(DiscourseModel):
    email: str | None = None
    skip_email: bool = False
    custom_message: str | None = None
    max_redemptions_allowed: int | None = None
    topic_id: int | None = None
    group_ids: str | None = None  # comma separated
    group_names: str | None = None  # comma separated
    expires_at: str | None = None


class CreateInviteResponse(DiscourseModel):
    id: int
    invite_key: str | None = None
    link: str
    description: str | None = None
    email: str | None = None
    domain: str | None = None
    emailed: bool | None = None
    can_delete_invite: bool | None = None
    custom_message: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    expires_at: str | None = None
    expired: bool | None = None
    topics: list[Any] | None = None
    groups: list[Any] | None = None


class CreateMultipleInvitesRequestBody(DiscourseModel):
    email: str | None = None
    skip_email: bool = False
    custom_message: str | None = None
    max_redemptions_allowed: int | None = None
    topic_id: int | None = None
    group_ids: str | None = None
    group_names: str | None = None
    expires_at: str | None = None


class SuccessfulInvitation(DiscourseModel):
    id: int
    link: str | None = None
    email: str | None = None
    emailed: bool | None = None
    custom_message: str | None = None
    topics: list[Any] | None = None
    groups: list[Any] | None = None
    created_at: str | None = None
    updated_at: str | None = None
    expires_at: str | None = None
    expired: bool | None = None


class CreateMultipleInvitesResponse(DiscourseModel):
    num_successfully_created_invitations: int
    num_failed_invitations: int
    failed_invitations: list[Any]
    successful_invitations: list[SuccessfulInvitation]
