"""Uploads, including direct and multipart uploads to external storage."""

from typing import Any

from pydantic import Field

from discourse_api.types.base import DiscourseModel
from discourse_api.types.base64 import Base64Data
from discourse_api.types.enums import Type, UploadType


class CreateUploadRequestBody(DiscourseModel):
    type_: Type = Field(alias="type")
    user_id: int | None = None  # required for avatar uploads
    synchronous: bool | None = None
    file: Base64Data | None = None


class Upload(DiscourseModel):
    id: int
    url: str
    original_filename: str
    filesize: int
    width: int | None = None
    height: int | None = None
    thumbnail_width: int | None = None
    thumbnail_height: int | None = None
    extension: str
    short_url: str
    short_path: str
    retain_hours: int | None = None
    human_filesize: str
    dominant_color: str | None = None


class CreateUploadResponse(Upload):
    pass


class Metadata(DiscourseModel):
    sha_1_checksum: str | None = Field(default=None, alias="sha1-checksum")


class GeneratePresignedPutRequestBody(DiscourseModel):
    type_: Type = Field(alias="type")
    file_name: str
    file_size: int  # bytes
    metadata: Metadata | None = None


class GeneratePresignedPutResponse(DiscourseModel):
    key: str | None = None
    url: str | None = None
    signed_headers: dict[str, Any] | None = None
    unique_identifier: str | None = None


class CompleteExternalUploadRequestBody(DiscourseModel):
    unique_identifier: str
    for_private_message: str | None = None
    for_site_setting: str | None = None
    pasted: str | None = None


class CompleteExternalUploadResponse(Upload):
    pass


class CreateMultipartUploadRequestBody(DiscourseModel):
    upload_type: UploadType
    file_name: str
    file_size: int  # bytes
    metadata: Metadata | None = None


class CreateMultipartUploadResponse(DiscourseModel):
    key: str
    external_upload_identifier: str
    unique_identifier: str


class BatchPresignMultipartPartsRequestBody(DiscourseModel):
    part_numbers: list[Any]  # 1 to 10000
    unique_identifier: str


class BatchPresignMultipartPartsResponse(DiscourseModel):
    presigned_urls: dict[str, str]


class AbortMultipartRequestBody(DiscourseModel):
    external_upload_identifier: str


class AbortMultipartResponse(DiscourseModel):
    success: str


class CompleteMultipartRequestBody(DiscourseModel):
    unique_identifier: str
    parts: list[Any]  # [{"part_number": 1, "etag": "..."}]


class CompleteMultipartResponse(Upload):
    pass
