"""TagGroup data model for tasktimeline."""

from typing import List
from pydantic import BaseModel, Field

from tasktimeline.models.task import TaskRecord


class TagGroup(BaseModel):
    """Tasks sharing one tag, in display order."""

    tag: str = Field(..., description="Tag string shared by every task in the group")
    color: str = Field(..., description="Resolved #RRGGBB color for the tag")
    tasks: List[TaskRecord] = Field(default_factory=list, description="Tasks in sorted order")
