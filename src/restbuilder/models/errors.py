from typing import Any, Sequence


class RestBuilderError(Exception):
    """Base class for errors raised by the request builder."""


class InvalidHttpMethodError(RestBuilderError, ValueError):
    def __init__(self, method: Any, acceptable: Sequence[str]):
        self.method = method
        self.acceptable = list(acceptable)
        self.message = (
            f"Invalid method: {method}\nValid methods: [{', '.join(self.acceptable)}]"
        )
        super().__init__(self.message)


class RequestNotBuiltError(RestBuilderError, RuntimeError):
    def __init__(
        self,
        message="Request has not been built. Call build() before send().",
    ):
        self.message = message
        super().__init__(self.message)


class HeadersNotSetError(RestBuilderError, LookupError):
    def __init__(
        self,
        message="No headers have been set. Call set_headers() before reading the Cookie header.",
    ):
        self.message = message
        super().__init__(self.message)
