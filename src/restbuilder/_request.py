from contextlib import ExitStack
from logging import getLogger
from os import PathLike
from typing import Any, Mapping, Optional, Union

from httpx import Client, Request as HttpxRequest, Response

from ._config import Config
from ._utils._attachment import Attachment, FileSource, PathFileSource
from ._utils._logs import LOGGER_NAME, setup_logging
from ._utils._request_spec import RequestSpec
from .models.cookie import Cookie
from .models.errors import (
    HeadersNotSetError,
    InvalidHttpMethodError,
    RequestNotBuiltError,
)
from .models.http_method import HttpMethod


class Request:
    """Fluent builder for a single HTTP request against a fixed base URL.

    Configure the request with the ``set_*`` methods (any order, any subset),
    call :meth:`build` once to bind an HTTP client to the base URL, then call
    :meth:`send` as many times as needed. Every send re-reads the current
    configuration, so setters called after ``build`` still take effect.

    Instances are not thread-safe.

    Example:
        ```python
        request = (
            Request("https://api.example/")
            .set_endpoint("users")
            .set_query_params({"page": "2"})
            .set_http_method("get")
            .build()
        )
        response = request.send()
        ```
    """

    ACCEPTABLE_METHODS: tuple[HttpMethod, ...] = tuple(HttpMethod)

    # PATCH has no entry and dispatches as GET.
    _DISPATCH: dict[HttpMethod, str] = {
        HttpMethod.POST: "POST",
        HttpMethod.PUT: "PUT",
        HttpMethod.DELETE: "DELETE",
    }
    _DEFAULT_DISPATCH = "GET"

    def __init__(self, base_url: str, *, debug: bool = False) -> None:
        self._config = Config(base_url=base_url, debug=debug)
        if self._config.debug:
            setup_logging(self._config.debug)
        self._logger = getLogger(LOGGER_NAME)

        self._spec = RequestSpec()
        self._client: Optional[Client] = None

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def method(self) -> Optional[HttpMethod]:
        return self._spec.method

    @property
    def endpoint(self) -> str:
        return self._spec.endpoint

    @property
    def headers(self) -> Optional[dict[str, str]]:
        return self._spec.headers

    @property
    def body(self) -> Optional[str]:
        return self._spec.content

    @property
    def query_params(self) -> Optional[dict[str, str]]:
        return self._spec.params

    @property
    def form_params(self) -> Optional[dict[str, str]]:
        return self._spec.data

    @property
    def cookie(self) -> Optional[Cookie]:
        return self._spec.cookie

    @property
    def attachment(self) -> Optional[Attachment]:
        return self._spec.attachment

    @property
    def is_built(self) -> bool:
        return self._client is not None

    def set_endpoint(self, endpoint: str) -> "Request":
        self._spec.endpoint = endpoint
        return self

    def set_headers(self, headers: Mapping[str, str]) -> "Request":
        self._spec.headers = dict(headers)
        return self

    def set_body(self, body: str) -> "Request":
        self._spec.content = body
        return self

    def set_query_params(self, params: Mapping[str, str]) -> "Request":
        self._spec.params = dict(params)
        return self

    def set_form_params(self, params: Mapping[str, str]) -> "Request":
        self._spec.data = dict(params)
        return self

    def set_cookie(self, cookie: Cookie) -> "Request":
        self._spec.cookie = cookie
        return self

    def add_file(
        self, field_name: str, file: Union[str, "PathLike[str]", FileSource]
    ) -> "Request":
        """Attach a single file as a multipart part, replacing any earlier one.

        Args:
            field_name: The multipart form field the file is sent under.
            file: Absolute path of the file, or a ``FileSource``. Paths are
                not checked here; the file is opened when the request is sent.

        Returns:
            Request: This builder.
        """
        source = file if isinstance(file, FileSource) else PathFileSource(file)
        self._spec.attachment = Attachment(field_name=field_name, source=source)
        return self

    def set_http_method(self, method: Union[str, HttpMethod]) -> "Request":
        """Set the HTTP method, case-insensitively.

        Args:
            method: One of GET, POST, DELETE, PUT or PATCH in any case.

        Returns:
            Request: This builder.

        Raises:
            InvalidHttpMethodError: If the upper-cased value is not an acceptable
                method. The stored method is left unchanged.
        """
        try:
            self._spec.method = HttpMethod(method.upper())
        except (AttributeError, ValueError):
            raise InvalidHttpMethodError(method, HttpMethod.values()) from None
        return self

    def get_cookie(self) -> Optional[str]:
        """Return the ``Cookie`` entry of the configured headers.

        This reads the header map only; the entity set through
        :meth:`set_cookie` is available as :attr:`cookie`.

        Raises:
            HeadersNotSetError: If no headers have been set.
        """
        if self._spec.headers is None:
            raise HeadersNotSetError()
        return self._spec.headers.get("Cookie")

    def build(self) -> "Request":
        if self._client is not None:
            self._client.close()

        self._client = Client(base_url=self._config.base_url)
        self._logger.debug(f"Built client for {self._config.base_url}")
        return self

    def send(self) -> Response:
        """Send the configured request and return the response.

        POST, PUT and DELETE are sent as such; every other method, including
        PATCH and an unset method, is sent as GET. Redirects are followed.
        Transport errors from httpx and errors opening the attachment
        propagate unchanged.

        Raises:
            RequestNotBuiltError: If :meth:`build` has not been called.
        """
        if self._client is None:
            raise RequestNotBuiltError()
        client = self._client

        method = self._DISPATCH.get(self._spec.method, self._DEFAULT_DISPATCH)  # type: ignore[arg-type]
        if self._spec.method is not None and self._spec.method.value != method:
            self._logger.debug(f"Method {self._spec.method.value} dispatched as {method}")

        self._logger.debug(f"Request: {method} {self._spec.endpoint}")
        self._logger.debug(f"HEADERS: {self._spec.headers}")

        # cookies stored by earlier responses must not leak into this dispatch
        client.cookies.clear()

        with ExitStack() as stack:
            files = None
            attachment = self._spec.attachment
            if attachment is not None:
                file = stack.enter_context(attachment.source.open())
                files = {attachment.field_name: (attachment.source.filename, file)}

            request = self._request(client, method, files)
            response = client.send(request, follow_redirects=True)

        self._logger.debug(f"Response: {response.status_code}")
        return response

    def _request(
        self, client: Client, method: str, files: Optional[dict[str, Any]]
    ) -> HttpxRequest:
        spec = self._spec
        kwargs: dict[str, Any] = {}

        if spec.headers is not None:
            kwargs["headers"] = dict(spec.headers)

        if spec.data is not None:
            kwargs["data"] = spec.data

        if spec.params is not None:
            kwargs["params"] = spec.params

        if spec.content is not None:
            kwargs["content"] = spec.content

        if spec.cookie is not None:
            headers = kwargs.get("headers", {})
            cookie_header = next((k for k in headers if k.lower() == "cookie"), None)
            if cookie_header is not None:
                headers[cookie_header] = f"{headers[cookie_header]}; {spec.cookie}"
            else:
                kwargs["cookies"] = {spec.cookie.name: spec.cookie.value}

        if files is not None:
            kwargs["files"] = files

        return client.build_request(method, spec.endpoint, **kwargs)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "Request":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        method = self._spec.method.value if self._spec.method else None
        return (
            f"Request(base_url={self._config.base_url!r}, method={method!r}, "
            f"endpoint={self._spec.endpoint!r})"
        )
