"""Business logic services used by the records controller.

Services are intentionally thin: they check that they were asked for the
category they were built for and run the blocking repository call in the
threadpool so the controller can await it.
"""

from typing import List, Optional
from fastapi.concurrency import run_in_threadpool
from . import models
from .errors import CategoryMismatchError, UnknownCategoryError
from .repositories import EDUCATION, EXPERIENCE, RecordsRepository, model_for_category


class RecordsService:
    """Fetch experience or educational records through a `RecordsRepository`."""
    def __init__(self, repository: RecordsRepository, category: str):
        model_for_category(category)
        if repository.category != category:
            raise UnknownCategoryError(
                f"repository category {repository.category!r} does not match service category {category!r}"
            )
        self.repository = repository
        self.category = category

    def _require(self, category: str):
        if self.category != category:
            raise CategoryMismatchError(
                f"{category} records requested from a {self.category} service"
            )

    async def _fetch_all(self, category: str):
        self._require(category)
        records = await run_in_threadpool(self.repository.get_all)
        # an empty table reads the same as a missing result to callers
        return records or None

    async def _fetch_one(self, category: str, record_id: str):
        self._require(category)
        return await run_in_threadpool(self.repository.get_by_id, record_id)

    async def get_all_experience_records(self) -> Optional[List[models.ExperienceRecord]]:
        """Return all experience records, or `None` when there are none."""
        return await self._fetch_all(EXPERIENCE)

    async def get_all_educational_records(self) -> Optional[List[models.EducationalRecord]]:
        """Return all educational records, or `None` when there are none."""
        return await self._fetch_all(EDUCATION)

    async def get_experience_record_by_id(self, record_id: str) -> Optional[models.ExperienceRecord]:
        return await self._fetch_one(EXPERIENCE, record_id)

    async def get_educational_record_by_id(self, record_id: str) -> Optional[models.EducationalRecord]:
        return await self._fetch_one(EDUCATION, record_id)
