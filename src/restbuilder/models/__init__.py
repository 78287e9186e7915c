from .cookie import Cookie
from .errors import (
    HeadersNotSetError,
    InvalidHttpMethodError,
    RequestNotBuiltError,
    RestBuilderError,
)
from .http_method import HttpMethod

__all__ = [
    "Cookie",
    "HttpMethod",
    "RestBuilderError",
    "InvalidHttpMethodError",
    "RequestNotBuiltError",
    "HeadersNotSetError",
]
