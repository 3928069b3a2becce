"""Calendar data models for tasktimeline.

A month grid is a flat list of cells in Sunday-first week rows. Padding cells
before the 1st and after the last day of the month are ``None``.
"""

from datetime import date
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from tasktimeline.models.constants import DAYS_PER_WEEK
from tasktimeline.models.task import TaskRecord


class CalendarCell(BaseModel):
    """Tasks due on a single day."""

    day: date = Field(..., description="Calendar day of the cell")
    tasks: List[TaskRecord] = Field(default_factory=list, description="All tasks due on this day")
    visible: List[TaskRecord] = Field(default_factory=list, description="Tasks shown in the cell")
    overflow: int = Field(0, ge=0, description="Number of tasks not shown")
    is_today: bool = Field(False, description="Whether the cell is the current day")


class MonthGrid(BaseModel):
    """Day grid for one calendar month."""

    year: int
    month: int = Field(..., ge=1, le=12)
    cells: List[Optional[CalendarCell]] = Field(default_factory=list)

    @property
    def weeks(self) -> List[List[Optional[CalendarCell]]]:
        return [self.cells[i:i + DAYS_PER_WEEK] for i in range(0, len(self.cells), DAYS_PER_WEEK)]

    @property
    def leading_blanks(self) -> int:
        count = 0
        for cell in self.cells:
            if cell is not None:
                break
            count += 1
        return count


class CalendarResult(BaseModel):
    """Month grids plus the day buckets they were built from."""

    months: List[MonthGrid] = Field(default_factory=list)
    cells: Dict[date, List[TaskRecord]] = Field(default_factory=dict)
    has_data: bool = Field(False, description="False when no dated records were supplied")
