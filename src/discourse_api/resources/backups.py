from discourse_api.resources.base import Resource
from discourse_api.types.backups import CreateBackupRequestBody, CreateBackupResponse, GetBackupsResponse


class Backups(Resource):
    def get(self) -> list[GetBackupsResponse]:
        """List backups."""
        return self.client.call("GET", "admin/backups.json", response_model=GetBackupsResponse, many=True)

    def create(self, body: CreateBackupRequestBody | dict) -> CreateBackupResponse:
        """Start a new backup."""
        return self.client.call(
            "POST",
            "admin/backups.json",
            body=body,
            body_model=CreateBackupRequestBody,
            response_model=CreateBackupResponse,
        )

    def download(self, filename: str, token: str) -> None:
        """Download a backup; ``token`` comes from the download email."""
        self.client.call(
            "GET",
            "admin/backups/{filename}",
            path_params={"filename": filename},
            query={"token": token},
        )

    def send_download_email(self, filename: str) -> None:
        """Email the download link of a backup to the current user."""
        self.client.call("PUT", "admin/backups/{filename}", path_params={"filename": filename})
