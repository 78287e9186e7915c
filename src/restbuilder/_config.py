from pydantic import BaseModel


class Config(BaseModel):
    base_url: str
    debug: bool = False
