"""
Thumbnail Domain Errors.

Every failure the upload and retrieval flows can surface to a caller.
The HTTP status is part of the error so the presentation layer needs no mapping table.
"""


class ThumbnailError(Exception):
    """Base class for errors that terminate a thumbnail request"""

    status_code = 500
    kind = "internal_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(ThumbnailError):
    """Missing video id, missing/invalid file part, or oversized upload"""

    status_code = 400
    kind = "bad_request"


class UnauthenticatedError(ThumbnailError):
    """Credential missing or failed verification"""

    status_code = 401
    kind = "unauthenticated"


class ForbiddenError(ThumbnailError):
    """Caller is not the owner of the video"""

    status_code = 403
    kind = "forbidden"


class NotFoundError(ThumbnailError):
    """Video does not exist, or it has no stored thumbnail"""

    status_code = 404
    kind = "not_found"


class MetadataUpdateError(ThumbnailError):
    """Thumbnail was stored but the video record could not be updated"""

    status_code = 500
    kind = "metadata_update_failed"


class MetadataStoreError(Exception):
    """Raised by metadata store implementations on backend failures"""
