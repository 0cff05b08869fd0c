from typing import Any

from discourse_api.types.base import DiscourseModel
from discourse_api.types.common import BasicUser, PrimaryGroup, TopicList


class Permissions(DiscourseModel):
    """Permission level per group name; 1 full, 2 create/reply, 3 see."""

    everyone: int | None = None
    staff: int | None = None


class CategoryLocalizations(DiscourseModel):
    id: int | None = None
    locale: str
    name: str
    description: str | None = None


class CreateCategoryRequestBody(DiscourseModel):
    name: str
    color: str | None = None
    text_color: str | None = None
    style_type: str | None = None
    emoji: str | None = None
    icon: str | None = None
    parent_category_id: int | None = None
    allow_badges: bool | None = None
    slug: str | None = None
    topic_featured_links_allowed: bool | None = None
    permissions: Permissions | None = None
    search_priority: int | None = None
    form_template_ids: list[Any] | None = None
    category_localizations: list[CategoryLocalizations] | None = None


class UpdateCategoryRequestBody(DiscourseModel):
    name: str
    color: str | None = None
    text_color: str | None = None
    style_type: str | None = None
    emoji: str | None = None
    icon: str | None = None
    parent_category_id: int | None = None
    allow_badges: bool | None = None
    slug: str | None = None
    topic_featured_links_allowed: bool | None = None
    permissions: Permissions | None = None
    search_priority: int | None = None
    form_template_ids: list[Any] | None = None
    category_localizations: list[CategoryLocalizations] | None = None


class Category(DiscourseModel):
    id: int
    name: str
    color: str | None = None
    text_color: str | None = None
    style_type: str | None = None
    emoji: str | None = None
    icon: str | None = None
    slug: str
    topic_count: int | None = None
    post_count: int | None = None
    position: int | None = None
    description: str | None = None
    description_text: str | None = None
    description_excerpt: str | None = None
    topic_url: str | None = None
    read_restricted: bool | None = None
    permission: int | None = None
    notification_level: int | None = None
    can_edit: bool | None = None
    topic_template: str | None = None
    has_children: bool | None = None
    subcategory_count: int | None = None
    sort_order: str | None = None
    sort_ascending: str | None = None
    show_subcategory_list: bool | None = None
    num_featured_topics: int | None = None
    default_view: str | None = None
    subcategory_list_style: str | None = None
    default_top_period: str | None = None
    default_list_filter: str | None = None
    minimum_required_tags: int | None = None
    navigate_to_first_post_after_read: bool | None = None
    parent_category_id: int | None = None
    auto_close_hours: str | None = None
    auto_close_based_on_last_post: bool | None = None
    allow_badges: bool | None = None
    topic_featured_link_allowed: bool | None = None
    search_priority: int | None = None
    uploaded_logo: Any | None = None
    uploaded_logo_dark: Any | None = None
    uploaded_background: Any | None = None
    uploaded_background_dark: Any | None = None
    available_groups: list[Any] | None = None
    group_permissions: list[Any] | None = None
    custom_fields: dict[str, Any] | None = None
    required_tag_groups: list[Any] | None = None
    form_template_ids: list[Any] | None = None
    topics_day: int | None = None
    topics_week: int | None = None
    topics_month: int | None = None
    topics_year: int | None = None
    topics_all_time: int | None = None
    subcategory_ids: list[int] | None = None


class CategoryList(DiscourseModel):
    can_create_category: bool
    can_create_topic: bool
    categories: list[Category]


class ListCategoriesResponse(DiscourseModel):
    category_list: CategoryList


class CreateCategoryResponse(DiscourseModel):
    category: Category


class UpdateCategoryResponse(DiscourseModel):
    success: str
    category: Category


class ListCategoryTopicsResponse(DiscourseModel):
    users: list[BasicUser] | None = None
    primary_groups: list[PrimaryGroup] | None = None
    topic_list: TopicList


class GetCategoryResponse(DiscourseModel):
    category: Category
