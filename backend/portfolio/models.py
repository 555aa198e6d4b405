"""SQLModel data models.

Experience and educational records are stored in two flat tables. The
controller treats their fields as opaque and passes them through to the
response envelope unchanged.
"""

from typing import Optional
from uuid import uuid4
from sqlmodel import SQLModel, Field


def _new_id() -> str:
    return uuid4().hex


class ExperienceRecord(SQLModel, table=True):
    """A job or role held, shown in the portfolio's experience section.

    `end_date` is left empty for a current position.
    """
    __tablename__ = "experience_records"

    id: str = Field(default_factory=_new_id, primary_key=True)
    title: str
    company: str
    location: Optional[str] = None
    start_date: str
    end_date: Optional[str] = None
    description: Optional[str] = None
    order_index: int = Field(default=0, index=True)


class EducationalRecord(SQLModel, table=True):
    """A degree, diploma or course shown in the education section."""
    __tablename__ = "educational_records"

    id: str = Field(default_factory=_new_id, primary_key=True)
    institution: str
    degree: str
    field_of_study: Optional[str] = None
    start_date: str
    end_date: Optional[str] = None
    description: Optional[str] = None
    order_index: int = Field(default=0, index=True)
