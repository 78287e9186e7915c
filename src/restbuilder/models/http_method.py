from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verbs accepted by the request builder."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"
    PUT = "PUT"
    PATCH = "PATCH"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]
