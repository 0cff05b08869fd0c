from discourse_api.resources.base import Resource
from discourse_api.types.categories import (
    CreateCategoryRequestBody,
    CreateCategoryResponse,
    GetCategoryResponse,
    ListCategoriesResponse,
    ListCategoryTopicsResponse,
    UpdateCategoryRequestBody,
    UpdateCategoryResponse,
)


class Categories(Resource):
    def list(self, include_subcategories: bool | None = None) -> ListCategoriesResponse:
        """Retrieve the list of categories."""
        return self.client.call(
            "GET",
            "categories.json",
            query={"include_subcategories": include_subcategories},
            response_model=ListCategoriesResponse,
        )

    def create_category(self, body: CreateCategoryRequestBody | dict) -> CreateCategoryResponse:
        return self.client.call(
            "POST",
            "categories.json",
            body=body,
            body_model=CreateCategoryRequestBody,
            response_model=CreateCategoryResponse,
        )

    def update_category(self, id: int, body: UpdateCategoryRequestBody | dict) -> UpdateCategoryResponse:
        return self.client.call(
            "PUT",
            "categories/{id}.json",
            path_params={"id": id},
            body=body,
            body_model=UpdateCategoryRequestBody,
            response_model=UpdateCategoryResponse,
        )

    def list_category_topics(self, id: int, slug: str) -> ListCategoryTopicsResponse:
        """List the topics of a category."""
        return self.client.call(
            "GET",
            "c/{slug}/{id}.json",
            path_params={"slug": slug, "id": id},
            response_model=ListCategoryTopicsResponse,
        )

    def get_category(self, id: int) -> GetCategoryResponse:
        return self.client.call(
            "GET",
            "c/{id}/show.json",
            path_params={"id": id},
            response_model=GetCategoryResponse,
        )
