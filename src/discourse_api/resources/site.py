from discourse_api.resources.base import Resource
from discourse_api.types.site import GetSiteBasicInfoResponse, GetSiteResponse


class Site(Resource):
    def get(self) -> GetSiteResponse:
        """Site settings, categories, groups and lookup tables."""
        return self.client.call("GET", "site.json", response_model=GetSiteResponse)

    def get_basic_info(self) -> GetSiteBasicInfoResponse:
        return self.client.call("GET", "site/basic-info.json", response_model=GetSiteBasicInfoResponse)
