import io
import os
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import IO, ContextManager, Generator


class FileSource(ABC):
    """Where the bytes of a multipart file part come from.

    Sources are opened only while a request is being sent, so a path that
    does not exist yet at configuration time is not an error.
    """

    @property
    @abstractmethod
    def filename(self) -> str: ...

    @abstractmethod
    def open(self) -> ContextManager[IO[bytes]]: ...


class PathFileSource(FileSource):
    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)

    @property
    def filename(self) -> str:
        return os.path.basename(self.path)

    @contextmanager
    def open(self) -> Generator[IO[bytes], None, None]:
        with open(self.path, "rb") as file:
            yield file

    def __repr__(self) -> str:
        return f"PathFileSource({self.path!r})"


class BytesFileSource(FileSource):
    def __init__(self, filename: str, content: bytes) -> None:
        self._filename = filename
        self.content = content

    @property
    def filename(self) -> str:
        return self._filename

    @contextmanager
    def open(self) -> Generator[IO[bytes], None, None]:
        buffer = io.BytesIO(self.content)
        try:
            yield buffer
        finally:
            buffer.close()

    def __repr__(self) -> str:
        return f"BytesFileSource({self._filename!r}, <{len(self.content)} bytes>)"


@dataclass(frozen=True)
class Attachment:
    """A single multipart file part: the form field name and its file source."""

    field_name: str
    source: FileSource
