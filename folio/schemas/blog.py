from typing import List

from pydantic import BaseModel, Field


class PostSummary(BaseModel):
    slug: str
    title: str
    date: str
    description: str
    tags: List[str] = Field(default_factory=list)


class PostRecord(PostSummary):
    content: str


class RenderedPost(PostRecord):
    html: str
    toc: str = ""
