"""Hypermedia link model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class LinkMethod(str, Enum):
    """HTTP methods a link can advertise."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class Link(BaseModel):
    """A ``{href, rel, method}`` triple advertising a follow-up action."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    href: str = Field(..., description="Absolute URL of the target")
    rel: str = Field(..., description="Relation of the target to the current resource")
    method: LinkMethod = Field(default=LinkMethod.GET, description="HTTP method to use")
