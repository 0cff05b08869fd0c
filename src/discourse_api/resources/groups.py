from discourse_api.resources.base import Resource
from discourse_api.types.groups import (
    AddGroupMembersRequestBody,
    AddGroupMembersResponse,
    CreateGroupRequestBody,
    CreateGroupResponse,
    DeleteGroupResponse,
    GetGroupByIdResponse,
    GetGroupResponse,
    ListGroupMembersResponse,
    ListGroupsResponse,
    RemoveGroupMembersRequestBody,
    RemoveGroupMembersResponse,
    UpdateGroupRequestBody,
    UpdateGroupResponse,
)


class Groups(Resource):
    def create(self, body: CreateGroupRequestBody | dict) -> CreateGroupResponse:
        return self.client.call(
            "POST",
            "admin/groups.json",
            body=body,
            body_model=CreateGroupRequestBody,
            response_model=CreateGroupResponse,
        )

    def delete(self, id: int) -> DeleteGroupResponse:
        return self.client.call(
            "DELETE",
            "admin/groups/{id}.json",
            path_params={"id": id},
            response_model=DeleteGroupResponse,
        )

    def get(self, name: str) -> GetGroupResponse:
        """Get a group by name."""
        return self.client.call(
            "GET",
            "groups/{name}.json",
            path_params={"name": name},
            response_model=GetGroupResponse,
        )

    def update(self, id: int, body: UpdateGroupRequestBody | dict) -> UpdateGroupResponse:
        return self.client.call(
            "PUT",
            "groups/{id}.json",
            path_params={"id": id},
            body=body,
            body_model=UpdateGroupRequestBody,
            response_model=UpdateGroupResponse,
        )

    def get_by_id(self, id: str) -> GetGroupByIdResponse:
        """Get a group by id; works for automatic groups too."""
        return self.client.call(
            "GET",
            "groups/by-id/{id}.json",
            path_params={"id": id},
            response_model=GetGroupByIdResponse,
        )

    def list_members(self, name: str) -> ListGroupMembersResponse:
        return self.client.call(
            "GET",
            "groups/{name}/members.json",
            path_params={"name": name},
            response_model=ListGroupMembersResponse,
        )

    def add_members(self, id: int, body: AddGroupMembersRequestBody | dict) -> AddGroupMembersResponse:
        return self.client.call(
            "PUT",
            "groups/{id}/members.json",
            path_params={"id": id},
            body=body,
            body_model=AddGroupMembersRequestBody,
            response_model=AddGroupMembersResponse,
        )

    def remove_members(self, id: int, body: RemoveGroupMembersRequestBody | dict) -> RemoveGroupMembersResponse:
        # DELETE with a JSON body
        return self.client.call(
            "DELETE",
            "groups/{id}/members.json",
            path_params={"id": id},
            body=body,
            body_model=RemoveGroupMembersRequestBody,
            response_model=RemoveGroupMembersResponse,
        )

    def list(self) -> ListGroupsResponse:
        return self.client.call("GET", "groups.json", response_model=ListGroupsResponse)
