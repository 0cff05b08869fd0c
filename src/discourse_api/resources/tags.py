from discourse_api.resources.base import Resource
from discourse_api.types.tags import (
    CreateTagGroupRequestBody,
    CreateTagGroupResponse,
    GetTagGroupResponse,
    GetTagResponse,
    ListTagGroupsResponse,
    ListTagsResponse,
    UpdateTagGroupRequestBody,
    UpdateTagGroupResponse,
)


class Tags(Resource):
    def list_groups(self) -> ListTagGroupsResponse:
        return self.client.call("GET", "tag_groups.json", response_model=ListTagGroupsResponse)

    def create_group(self, body: CreateTagGroupRequestBody | dict) -> CreateTagGroupResponse:
        return self.client.call(
            "POST",
            "tag_groups.json",
            body=body,
            body_model=CreateTagGroupRequestBody,
            response_model=CreateTagGroupResponse,
        )

    def get_group(self, id: str) -> GetTagGroupResponse:
        return self.client.call(
            "GET",
            "tag_groups/{id}.json",
            path_params={"id": id},
            response_model=GetTagGroupResponse,
        )

    def update_group(self, id: str, body: UpdateTagGroupRequestBody | dict) -> UpdateTagGroupResponse:
        return self.client.call(
            "PUT",
            "tag_groups/{id}.json",
            path_params={"id": id},
            body=body,
            body_model=UpdateTagGroupRequestBody,
            response_model=UpdateTagGroupResponse,
        )

    def list(self) -> ListTagsResponse:
        """List all tags with their topic counts."""
        return self.client.call("GET", "tags.json", response_model=ListTagsResponse)

    def get(self, name: str) -> GetTagResponse:
        """Topics carrying a tag."""
        return self.client.call("GET", "tag/{name}.json", path_params={"name": name}, response_model=GetTagResponse)
