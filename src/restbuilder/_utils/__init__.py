from ._attachment import Attachment, BytesFileSource, FileSource, PathFileSource
from ._logs import LOGGER_NAME, setup_logging
from ._request_spec import RequestSpec

__all__ = [
    "Attachment",
    "FileSource",
    "PathFileSource",
    "BytesFileSource",
    "RequestSpec",
    "LOGGER_NAME",
    "setup_logging",
]
