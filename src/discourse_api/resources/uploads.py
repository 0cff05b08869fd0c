"""Uploads, direct to Discourse or through external (S3) storage."""

from discourse_api.resources.base import Resource
from discourse_api.types.multipart import Attachment
from discourse_api.types.uploads import (
    AbortMultipartRequestBody,
    AbortMultipartResponse,
    BatchPresignMultipartPartsRequestBody,
    BatchPresignMultipartPartsResponse,
    CompleteExternalUploadRequestBody,
    CompleteExternalUploadResponse,
    CompleteMultipartRequestBody,
    CompleteMultipartResponse,
    CreateMultipartUploadRequestBody,
    CreateMultipartUploadResponse,
    CreateUploadRequestBody,
    CreateUploadResponse,
    GeneratePresignedPutRequestBody,
    GeneratePresignedPutResponse,
)


class Uploads(Resource):
    def create(self, attachments: list[Attachment], body: CreateUploadRequestBody | dict) -> CreateUploadResponse:
        """Upload files as multipart form data.

        The body travels as a ``body`` part holding JSON; each attachment
        becomes a part named after ``Attachment.name``.
        """
        return self.client.call(
            "POST",
            "uploads.json",
            body=body,
            body_model=CreateUploadRequestBody,
            files=[(attachment.name, attachment.to_part()) for attachment in attachments],
            response_model=CreateUploadResponse,
        )

    def generate_presigned_put(self, body: GeneratePresignedPutRequestBody | dict) -> GeneratePresignedPutResponse:
        """Start a direct external upload.

        The file is then PUT to the returned presigned URL and the upload
        finished with ``complete_external``. Needs an external file store
        with ``enable_direct_s3_uploads`` turned on.
        """
        return self.client.call(
            "POST",
            "uploads/generate-presigned-put.json",
            body=body,
            body_model=GeneratePresignedPutRequestBody,
            response_model=GeneratePresignedPutResponse,
        )

    def complete_external(self, body: CompleteExternalUploadRequestBody | dict) -> CompleteExternalUploadResponse:
        return self.client.call(
            "POST",
            "uploads/complete-external-upload.json",
            body=body,
            body_model=CompleteExternalUploadRequestBody,
            response_model=CompleteExternalUploadResponse,
        )

    def create_multipart(self, body: CreateMultipartUploadRequestBody | dict) -> CreateMultipartUploadResponse:
        """Start a multipart external upload for large files."""
        return self.client.call(
            "POST",
            "uploads/create-multipart.json",
            body=body,
            body_model=CreateMultipartUploadRequestBody,
            response_model=CreateMultipartUploadResponse,
        )

    def batch_presign_multipart_parts(
        self, body: BatchPresignMultipartPartsRequestBody | dict
    ) -> BatchPresignMultipartPartsResponse:
        return self.client.call(
            "POST",
            "uploads/batch-presign-multipart-parts.json",
            body=body,
            body_model=BatchPresignMultipartPartsRequestBody,
            response_model=BatchPresignMultipartPartsResponse,
        )

    def abort_multipart(self, body: AbortMultipartRequestBody | dict) -> AbortMultipartResponse:
        return self.client.call(
            "POST",
            "uploads/abort-multipart.json",
            body=body,
            body_model=AbortMultipartRequestBody,
            response_model=AbortMultipartResponse,
        )

    def complete_multipart(self, body: CompleteMultipartRequestBody | dict) -> CompleteMultipartResponse:
        return self.client.call(
            "POST",
            "uploads/complete-multipart.json",
            body=body,
            body_model=CompleteMultipartRequestBody,
            response_model=CompleteMultipartResponse,
        )
