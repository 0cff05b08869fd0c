from __future__ import annotations

from discourse_api.resources.base import Resource
from discourse_api.types.posts import (
    CreateTopicPostPMRequestBody,
    CreateTopicPostPMResponse,
    DeletePostRequestBody,
    GetPostResponse,
    ListPostsResponse,
    LockPostRequestBody,
    LockPostResponse,
    PerformPostActionRequestBody,
    PerformPostActionResponse,
    PostRepliesResponse,
    UpdatePostRequestBody,
    UpdatePostResponse,
)


class Posts(Resource):
    def list(self, before: int | None = None) -> ListPostsResponse:
        """List the latest posts across topics, newest first.

        ``before`` is a post id; only posts older than it are returned.
        """
        return self.client.call("GET", "posts.json", query={"before": before}, response_model=ListPostsResponse)

    def create_topic_pm(self, body: CreateTopicPostPMRequestBody | dict) -> CreateTopicPostPMResponse:
        """Create a topic, a post or a private message."""
        return self.client.call(
            "POST",
            "posts.json",
            body=body,
            body_model=CreateTopicPostPMRequestBody,
            response_model=CreateTopicPostPMResponse,
        )

    def get(self, id: str) -> GetPostResponse:
        return self.client.call("GET", "posts/{id}.json", path_params={"id": id}, response_model=GetPostResponse)

    def update(self, id: str, body: UpdatePostRequestBody | dict) -> UpdatePostResponse:
        return self.client.call(
            "PUT",
            "posts/{id}.json",
            path_params={"id": id},
            body=body,
            body_model=UpdatePostRequestBody,
            response_model=UpdatePostResponse,
        )

    def delete(self, id: int, body: DeletePostRequestBody | dict) -> None:
        self.client.call(
            "DELETE",
            "posts/{id}.json",
            path_params={"id": id},
            body=body,
            body_model=DeletePostRequestBody,
        )

    def replies(self, id: str) -> list[PostRepliesResponse]:
        """List replies to a post."""
        return self.client.call(
            "GET",
            "posts/{id}/replies.json",
            path_params={"id": id},
            response_model=PostRepliesResponse,
            many=True,
        )

    def lock(self, id: str, body: LockPostRequestBody | dict) -> LockPostResponse:
        return self.client.call(
            "PUT",
            "posts/{id}/locked.json",
            path_params={"id": id},
            body=body,
            body_model=LockPostRequestBody,
            response_model=LockPostResponse,
        )

    def perform_action(self, body: PerformPostActionRequestBody | dict) -> PerformPostActionResponse:
        """Like a post, or flag it."""
        return self.client.call(
            "POST",
            "post_actions.json",
            body=body,
            body_model=PerformPostActionRequestBody,
            response_model=PerformPostActionResponse,
        )
