"""Badge definitions and user badge grants."""

from typing import Any

from pydantic import Field

from discourse_api.types.base import DiscourseModel


class Badge(DiscourseModel):
    id: int
    name: str
    description: str | None = None
    grant_count: int | None = None
    allow_title: bool | None = None
    multiple_grant: bool | None = None
    icon: str | None = None
    image_url: str | None = None
    image_upload_id: int | None = None
    listable: bool | None = None
    enabled: bool | None = None
    badge_grouping_id: int | None = None
    system: bool | None = None
    long_description: str | None = None
    slug: str | None = None
    manually_grantable: bool | None = None
    query: str | None = None
    trigger: int | None = None
    target_posts: bool | None = None
    auto_revoke: bool | None = None
    show_posts: bool | None = None
    show_in_post_header: bool | None = None
    i_18n_name: str | None = Field(default=None, alias="i18n_name")
    badge_type_id: int


class BadgeType(DiscourseModel):
    id: int
    name: str
    sort_order: int | None = None


class BadgeGrouping(DiscourseModel):
    id: int
    name: str
    description: str | None = None
    position: int | None = None
    system: bool | None = None


class AdminBadges(DiscourseModel):
    """Lookup tables attached to the admin badge listing."""

    protected_system_fields: list[Any] | None = None
    triggers: dict[str, int] | None = None
    badge_ids: list[int] | None = None
    badge_grouping_ids: list[int] | None = None
    badge_type_ids: list[int] | None = None


class AdminListBadgesResponse(DiscourseModel):
    badges: list[Badge]
    badge_types: list[BadgeType]
    badge_groupings: list[BadgeGrouping]
    admin_badges: AdminBadges | None = None


class CreateBadgeRequestBody(DiscourseModel):
    name: str
    badge_type_id: int


class CreateBadgeResponse(DiscourseModel):
    badge_types: list[BadgeType]
    badge: Badge


class UpdateBadgeRequestBody(DiscourseModel):
    name: str
    badge_type_id: int


class UpdateBadgeResponse(DiscourseModel):
    badge_types: list[BadgeType]
    badge: Badge


class GrantedBy(DiscourseModel):
    id: int
    username: str
    name: str | None = None
    avatar_template: str
    flair_name: str | None = None
    admin: bool | None = None
    moderator: bool | None = None
    trust_level: int | None = None


class UserBadge(DiscourseModel):
    id: int
    granted_at: str
    created_at: str | None = None
    count: int | None = None
    badge_id: int
    user_id: int
    granted_by_id: int


class ListUserBadgesResponse(DiscourseModel):
    badges: list[Badge] | None = None
    badge_types: list[BadgeType] | None = None
    granted_bies: list[GrantedBy] | None = None
    user_badges: list[UserBadge]
