from typing import Annotated

from pydantic import AnyUrl, BaseModel, Field, TypeAdapter, UrlConstraints, ValidationError, field_validator
from pydantic_core import PydanticCustomError

# Absolute URL: a scheme and a host are both required
AbsoluteUrl = Annotated[AnyUrl, UrlConstraints(host_required=True)]

_absolute_url = TypeAdapter(AbsoluteUrl)


class UrlPayload(BaseModel):
    """Form body of a create-mapping request"""

    url: str = Field(..., description="The original URL to be shortened")

    @field_validator("url")
    @classmethod
    def must_be_absolute_url(cls, value: str) -> str:
        # Validate with pydantic's URL parser but keep the submitted text:
        # AnyUrl would normalise it (e.g. add a trailing slash) and the
        # redirect has to point at exactly what the client sent.
        # The parser silently drops tabs and newlines; they must never reach
        # the Location header.
        if any(ord(char) < 0x20 or ord(char) == 0x7F for char in value):
            raise PydanticCustomError(
                "url",
                "Invalid URL: control characters are not allowed",
            )
        try:
            _absolute_url.validate_python(value)
        except ValidationError as exc:
            reason = exc.errors()[0]["msg"]
            raise PydanticCustomError(
                "url",
                "Invalid URL: {reason}",
                {"reason": reason},
            )
        return value
