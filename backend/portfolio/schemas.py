"""Pydantic request/response schemas used by the API.

Schemas keep API input/output shapes stable and provide validation for
controller handlers, the import script and tests.
"""

from pydantic import BaseModel, ConfigDict, model_validator
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class ResponseData(BaseModel, Generic[T]):
    """Standard envelope returned by every records handler.

    `status` is always present. A success envelope carries `data`, an
    error envelope carries `error`.
    """
    status: int
    data: Optional[T] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _data_or_error(self):
        if (self.data is None) == (self.error is None):
            raise ValueError("exactly one of data or error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None


class ExperienceRecordOut(BaseModel):
    """Experience record as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    company: str
    location: Optional[str] = None
    start_date: str
    end_date: Optional[str] = None
    description: Optional[str] = None
    order_index: int = 0


class EducationalRecordOut(BaseModel):
    """Educational record as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    institution: str
    degree: str
    field_of_study: Optional[str] = None
    start_date: str
    end_date: Optional[str] = None
    description: Optional[str] = None
    order_index: int = 0


class ExperienceRecordIn(BaseModel):
    """Experience record payload accepted by the import script."""
    id: Optional[str] = None
    title: str
    company: str
    location: Optional[str] = None
    start_date: str
    end_date: Optional[str] = None
    description: Optional[str] = None
    order_index: int = 0


class EducationalRecordIn(BaseModel):
    """Educational record payload accepted by the import script."""
    id: Optional[str] = None
    institution: str
    degree: str
    field_of_study: Optional[str] = None
    start_date: str
    end_date: Optional[str] = None
    description: Optional[str] = None
    order_index: int = 0


class RecordsImportFile(BaseModel):
    """Top-level shape of a records JSON file."""
    experience: List[ExperienceRecordIn] = []
    education: List[EducationalRecordIn] = []
