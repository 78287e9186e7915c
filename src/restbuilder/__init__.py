"""Fluent builder for composing and sending HTTP requests with httpx."""

from ._request import Request
from ._utils._attachment import Attachment, BytesFileSource, FileSource, PathFileSource
from .models import (
    Cookie,
    HeadersNotSetError,
    HttpMethod,
    InvalidHttpMethodError,
    RequestNotBuiltError,
    RestBuilderError,
)

__all__ = [
    "Request",
    "HttpMethod",
    "Cookie",
    "Attachment",
    "FileSource",
    "PathFileSource",
    "BytesFileSource",
    "RestBuilderError",
    "InvalidHttpMethodError",
    "RequestNotBuiltError",
    "HeadersNotSetError",
]
