"""Repository classes encapsulating database operations.

`RecordsRepository` serves one record category (`experience` or
`education`). It works against an injected `Session` when one is given,
otherwise each call opens a short-lived session on the configured engine.
Returned objects are detached SQLModel rows.
"""

from contextlib import contextmanager
from typing import List, Optional, Union
from sqlmodel import Session, select
from . import database, models
from .errors import UnknownCategoryError

EXPERIENCE = "experience"
EDUCATION = "education"

RECORD_MODELS = {
    EXPERIENCE: models.ExperienceRecord,
    EDUCATION: models.EducationalRecord,
}

Record = Union[models.ExperienceRecord, models.EducationalRecord]


def model_for_category(category: str):
    """Return the table model for `category` or raise `UnknownCategoryError`."""
    try:
        return RECORD_MODELS[category]
    except (KeyError, TypeError):
        raise UnknownCategoryError(
            f"unknown record category: {category!r}",
            context={"allowed": sorted(RECORD_MODELS)},
        ) from None


class RecordsRepository:
    """Read and create operations for a single record category."""
    def __init__(self, category: str, session: Optional[Session] = None):
        self.category = category
        self.model = model_for_category(category)
        self.session = session

    @contextmanager
    def _session(self):
        if self.session is not None:
            yield self.session
            return
        with Session(database.engine, expire_on_commit=False) as session:
            yield session

    def get_all(self) -> List[Record]:
        """Return every record of the category, `order_index` first, newest start next."""
        stmt = select(self.model).order_by(self.model.order_index, self.model.start_date.desc())
        with self._session() as session:
            return list(session.exec(stmt).all())

    def get_by_id(self, record_id: str) -> Optional[Record]:
        """Return a record by primary key or `None` if not found."""
        with self._session() as session:
            return session.get(self.model, record_id)

    def create(self, record: Record) -> Record:
        """Persist a new record and return the refreshed instance."""
        if not isinstance(record, self.model):
            raise UnknownCategoryError(
                f"{type(record).__name__} cannot be stored as a {self.category} record"
            )
        with self._session() as session:
            session.add(record)
            session.commit()
            session.refresh(record)
            return record
