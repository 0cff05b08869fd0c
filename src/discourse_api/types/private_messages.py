from discourse_api.types.base import DiscourseModel
from discourse_api.types.common import BasicUser, PrimaryGroup, TopicList


class ListUserPrivateMessagesResponse(DiscourseModel):
    users: list[BasicUser] | None = None
    primary_groups: list[PrimaryGroup] | None = None
    topic_list: TopicList


class GetUserSentPrivateMessagesResponse(DiscourseModel):
    users: list[BasicUser] | None = None
    primary_groups: list[PrimaryGroup] | None = None
    topic_list: TopicList
