"""Upload package - record mapping, request building and HTTP client."""

from .client import UploadClient, UploadResponse
from .mapper import FieldMapper, UploadRecord
from .request import RequestBuilder, UpdateRequest

__all__ = [
    "FieldMapper",
    "RequestBuilder",
    "UpdateRequest",
    "UploadClient",
    "UploadRecord",
    "UploadResponse",
]
