from pydantic import BaseModel, Field


class Dialect(BaseModel):
    """Named preset of the settings that vary between CSV producers."""

    name: str
    description: str = ""
    delimiter: str = Field(default=",", min_length=1, max_length=1)
    quotechar: str = Field(default='"', min_length=1, max_length=1)
    has_header: bool = True
    encoding: str = "utf-8-sig"
    skip_rows: int = Field(default=0, ge=0)

    class Config:
        extra = "forbid"
