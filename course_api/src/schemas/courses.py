from __future__ import annotations

from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Prices stay exact in memory and go out as plain JSON numbers.
Price = Annotated[
    Decimal,
    Field(ge=0),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class CourseBase(BaseModel):
    """Course fields a client may set; everything except the identifier."""
    title: str = Field(..., description="Course title")
    description: str = Field("", description="Free text description")
    category: str = Field("", description="Subject category")
    kind: str = Field(
        ...,
        alias="type",
        description="Offering kind, e.g. ONE_TIME, COURSE or CLUB. Open-ended.",
    )
    grade_range: str = Field("", description="School grade range, e.g. '3-5'")
    min_age: int = Field(0, description="Minimum participant age")
    max_age: int = Field(0, description="Maximum participant age")
    price: Price = Field(Decimal("0"), description="Price per enrolment")
    next_session_date: Optional[AwareDatetime] = Field(
        None, description="Start of the next session (ISO-8601 with offset)"
    )

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class Course(CourseBase):
    """A course record. `id` is None until the repository assigns one."""
    id: Optional[int] = Field(None, description="Course ID")


class CoursePage(BaseModel):
    """One page of courses plus pagination metadata."""
    courses: List[Course] = Field(default_factory=list, description="Courses on this page")
    current_page: int = Field(..., description="Zero-based page number")
    total_items: int = Field(..., description="Number of courses matching the filter")
    total_pages: int = Field(..., description="Number of pages at the requested size")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
