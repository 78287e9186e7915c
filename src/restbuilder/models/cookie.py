from pydantic import BaseModel, ConfigDict


class Cookie(BaseModel):
    """A single name/value cookie sent with a request."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name}={self.value}"
