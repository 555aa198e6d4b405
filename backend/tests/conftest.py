import os
import shutil
import tempfile
from pathlib import Path

import pytest

# Point the app at a throwaway SQLite file before `portfolio` is imported.
_TMP_DIR = Path(tempfile.mkdtemp(prefix="portfolio-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'test.db'}"
os.environ["ENV"] = "dev"

from sqlmodel import SQLModel  # noqa: E402
from portfolio import database, models  # noqa: E402,F401


@pytest.fixture(scope="session", autouse=True)
def temp_db_dir():
    """Remove the throwaway database directory once the session ends."""
    yield _TMP_DIR
    database.engine.dispose()
    shutil.rmtree(_TMP_DIR, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_db():
    """Give every test empty record tables."""
    SQLModel.metadata.drop_all(database.engine)
    SQLModel.metadata.create_all(database.engine)
    yield


@pytest.fixture
def seed_records():
    """Insert two experience records and one educational record."""
    from portfolio.repositories import EDUCATION, EXPERIENCE, RecordsRepository
    exp = RecordsRepository(EXPERIENCE)
    edu = RecordsRepository(EDUCATION)
    older = exp.create(models.ExperienceRecord(
        id="exp-old", title="Junior Developer", company="Initech",
        start_date="2019-06", end_date="2022-02", order_index=1,
    ))
    current = exp.create(models.ExperienceRecord(
        id="exp-new", title="Backend Engineer", company="Acme Corp",
        start_date="2022-03", order_index=0,
    ))
    degree = edu.create(models.EducationalRecord(
        id="edu-1", institution="State University", degree="BSc",
        field_of_study="Computer Science", start_date="2015-09", end_date="2019-05",
    ))
    return {"experience": [current, older], "education": [degree]}
