"""CLI script to load portfolio records from a JSON file into the backend DB.
Usage: python scripts/import_records.py [PATH] [--dry-run]

The file holds `{"experience": [...], "education": [...]}`; see
`data/records.example.json`.
"""
import sys
import argparse
import json
import pathlib
from typing import Optional
# Ensure `backend/` is on sys.path so `portfolio` package imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from pydantic import ValidationError
from sqlmodel import Session
from portfolio import models
from portfolio.database import engine, create_db_and_tables
from portfolio.repositories import EDUCATION, EXPERIENCE, RecordsRepository
from portfolio.schemas import RecordsImportFile

DEFAULT_PATH = ROOT / 'data' / 'records.example.json'


def load_records_file(path: pathlib.Path) -> RecordsImportFile:
    """Parse and validate a records JSON file."""
    return RecordsImportFile.model_validate(json.loads(path.read_text(encoding='utf-8')))


def import_records(payload: RecordsImportFile, session: Session, dry_run: bool = False) -> dict:
    """Persist the records in `payload` and return per-category counts.

    Items whose id already exists, or repeats an earlier item in the same
    file, are skipped so the import can be re-run. Dry runs count the same way.
    """
    summary = {EXPERIENCE: {'created': 0, 'skipped': 0}, EDUCATION: {'created': 0, 'skipped': 0}}
    batches = (
        (EXPERIENCE, models.ExperienceRecord, payload.experience),
        (EDUCATION, models.EducationalRecord, payload.education),
    )
    for category, model, items in batches:
        repo = RecordsRepository(category, session=session)
        seen_ids = set()
        for item in items:
            data = item.model_dump(exclude_none=True)
            if item.id and (item.id in seen_ids or repo.get_by_id(item.id)):
                summary[category]['skipped'] += 1
                continue
            if item.id:
                seen_ids.add(item.id)
            if not dry_run:
                repo.create(model(**data))
            summary[category]['created'] += 1
    return summary


def main(path: Optional[pathlib.Path] = None, dry_run: bool = False) -> int:
    """Import records from `path` and print a short summary.

    Returns a process exit code.
    """
    path = path or DEFAULT_PATH
    if not path.exists():
        print(f'Records file not found at {path}')
        return 1
    try:
        payload = load_records_file(path)
    except (ValueError, ValidationError) as e:
        print(f'Invalid records file {path}: {e}')
        return 1
    create_db_and_tables()
    with Session(engine) as session:
        summary = import_records(payload, session, dry_run=dry_run)
    for category, counts in summary.items():
        verb = 'would create' if dry_run else 'created'
        print(f'{category}: {verb} {counts["created"]}, skipped {counts["skipped"]}')
    return 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('path', nargs='?', type=pathlib.Path, help='JSON file with experience/education records')
    parser.add_argument('--dry-run', action='store_true', help='Validate and count without writing')
    args = parser.parse_args()
    sys.exit(main(path=args.path, dry_run=args.dry_run))
