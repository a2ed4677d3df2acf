from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, model_validator


class ResourceItem(BaseModel):
    title: str
    desc: str
    type: Literal["phone", "link"]
    phone: str | None = None
    url: str | None = None

    @model_validator(mode="after")
    def _check_target(self) -> ResourceItem:
        if self.type == "phone" and not self.phone:
            raise ValueError("phone resources need a number")
        if self.type == "link" and not self.url:
            raise ValueError("link resources need a url")
        return self


class ResourceSection(BaseModel):
    heading: str
    items: list[ResourceItem]


class ResourcesResponse(BaseModel):
    quick_support: list[ResourceItem]
    sections: list[ResourceSection]


__all__ = ["ResourceItem", "ResourceSection", "ResourcesResponse"]
