from typing import Any

from discourse_api.types.base import DiscourseModel
from discourse_api.types.common import BasicUser, PrimaryGroup, TopicList


class TagGroup(DiscourseModel):
    id: int
    name: str
    tag_names: list[Any] | None = None
    parent_tag_name: list[Any] | None = None
    one_per_topic: bool | None = None
    permissions: dict[str, int] | None = None


class ListTagGroupsResponse(DiscourseModel):
    tag_groups: list[TagGroup]


class CreateTagGroupRequestBody(DiscourseModel):
    name: str


class CreateTagGroupResponse(DiscourseModel):
    tag_group: TagGroup


class GetTagGroupResponse(DiscourseModel):
    tag_group: TagGroup


class UpdateTagGroupRequestBody(DiscourseModel):
    name: str | None = None


class UpdateTagGroupResponse(DiscourseModel):
    success: str
    tag_group: TagGroup


class Tag(DiscourseModel):
    id: str
    text: str
    name: str | None = None
    description: str | None = None
    count: int
    pm_count: int | None = None
    target_tag: str | None = None


class ListTagsExtras(DiscourseModel):
    categories: list[Any]


class ListTagsResponse(DiscourseModel):
    tags: list[Tag]
    extras: ListTagsExtras | None = None


class TagInfo(DiscourseModel):
    id: int
    name: str
    topic_count: int
    staff: bool
    description: str | None = None


class TagTopicList(TopicList):
    tags: list[TagInfo] | None = None


class GetTagResponse(DiscourseModel):
    users: list[BasicUser] | None = None
    primary_groups: list[PrimaryGroup] | None = None
    topic_list: TagTopicList
