"""Site-wide settings and lookup tables."""

from typing import Any

from discourse_api.types.base import DiscourseModel


class TrustLevels(DiscourseModel):
    newuser: int
    basic: int
    member: int
    regular: int
    leader: int


class SiteGroup(DiscourseModel):
    id: int
    name: str
    flair_url: str | None = None
    flair_bg_color: str | None = None
    flair_color: str | None = None


class PostActionType(DiscourseModel):
    id: int | None = None
    name_key: str | None = None
    name: str
    description: str
    short_description: str
    is_flag: bool
    is_custom_flag: bool | None = None
    is_used: bool | None = None
    enabled: bool | None = None
    applies_to: list[str] | None = None
    position: int | None = None
    require_message: bool | None = None
    auto_action_type: bool | None = None


class UserTheme(DiscourseModel):
    theme_id: int
    name: str
    default: bool
    color_scheme_id: int | None = None


class UserColorScheme(DiscourseModel):
    id: int
    name: str
    is_dark: bool


class SiteCategory(DiscourseModel):
    id: int
    name: str
    color: str
    text_color: str
    slug: str
    topic_count: int
    post_count: int
    position: int
    description: str | None = None
    description_text: str | None = None
    description_excerpt: str | None = None
    topic_url: str | None = None
    read_restricted: bool
    permission: int | None = None
    notification_level: int
    topic_template: str | None = None
    has_children: bool
    subcategory_count: int | None = None
    sort_order: str | None = None
    sort_ascending: str | None = None
    show_subcategory_list: bool
    num_featured_topics: int
    default_view: str | None = None
    subcategory_list_style: str
    default_top_period: str
    default_list_filter: str
    minimum_required_tags: int
    navigate_to_first_post_after_read: bool
    allowed_tags: list[Any] | None = None
    allowed_tag_groups: list[Any] | None = None
    allow_global_tags: bool | None = None
    required_tag_groups: list[Any] | None = None
    read_only_banner: str | None = None
    form_template_ids: list[Any] | None = None
    uploaded_logo: Any | None = None
    uploaded_logo_dark: Any | None = None
    uploaded_background: Any | None = None
    uploaded_background_dark: Any | None = None
    can_edit: bool
    parent_category_id: int | None = None


class Archetype(DiscourseModel):
    id: str
    name: str
    options: list[Any]


class GetSiteResponse(DiscourseModel):
    default_archetype: str
    notification_types: dict[str, int]
    post_types: dict[str, int]
    trust_levels: TrustLevels
    groups: list[SiteGroup]
    filters: list[str]
    periods: list[str]
    top_menu_items: list[str]
    anonymous_top_menu_items: list[str]
    uncategorized_category_id: int
    user_field_max_length: int
    post_action_types: list[PostActionType]
    topic_flag_types: list[PostActionType]
    can_create_tag: bool
    can_tag_topics: bool
    can_tag_pms: bool
    tags_filter_regexp: str
    top_tags: list[Any]
    navigation_menu_site_top_tags: list[Any] | None = None
    topic_featured_link_allowed_category_ids: list[int]
    user_themes: list[UserTheme]
    user_color_schemes: list[UserColorScheme]
    default_dark_color_scheme: Any | None = None
    censored_regexp: list[dict[str, Any]]
    custom_emoji_translation: dict[str, Any]
    watched_words_replace: Any | None = None
    watched_words_link: Any | None = None
    markdown_additional_options: dict[str, Any] | None = None
    hashtag_configurations: dict[str, Any] | None = None
    hashtag_icons: dict[str, Any] | None = None
    displayed_about_plugin_stat_groups: list[Any] | None = None
    categories: list[SiteCategory]
    archetypes: list[Archetype]
    user_fields: list[Any]
    auth_providers: list[Any]
    whispers_allowed_groups_names: list[Any] | None = None
    denied_emojis: list[Any] | None = None
    valid_flag_applies_to_types: list[Any] | None = None
    navigation_menu_site_top_tags_count: int | None = None


class GetSiteBasicInfoResponse(DiscourseModel):
    logo_url: str
    logo_small_url: str
    apple_touch_icon_url: str
    favicon_url: str
    title: str
    description: str
    header_primary_color: str
    header_background_color: str
    login_required: bool
    locale: str
    include_in_discourse_discover: bool
    mobile_logo_url: str
