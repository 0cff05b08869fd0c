from discourse_api.types.base import DiscourseModel


class GetBackupsResponse(DiscourseModel):
    filename: str
    size: int
    last_modified: str


class CreateBackupRequestBody(DiscourseModel):
    with_uploads: bool


class CreateBackupResponse(DiscourseModel):
    success: str
