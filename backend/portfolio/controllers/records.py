"""Records controller.

Handlers that fetch experience and educational records. Each handler builds
a `RecordsRepository` and a `RecordsService` for its category, awaits a
single fetch and returns a `ResponseData` envelope. Handlers never raise:
invalid IDs give a 400 envelope, fetch failures a 500 envelope and a missing
record a 200 envelope with an informational message.
"""

from typing import List, Union

from ..repositories import EDUCATION, EXPERIENCE, RecordsRepository
from ..schemas import EducationalRecordOut, ExperienceRecordOut, ResponseData
from ..services import RecordsService
from ..utils.response_builder import ApiResponseBuilder


async def get_all_experience_records() -> ResponseData[Union[List[ExperienceRecordOut], str]]:
    """Retrieve all experience records.

    Returns a success envelope with the records, a success envelope with
    `No Experience records fetched` when there are none, or an error
    envelope when the fetch fails.
    """
    try:
        records_repository = RecordsRepository(EXPERIENCE)
        records_service = RecordsService(records_repository, EXPERIENCE)
        records = await records_service.get_all_experience_records()
        if not records:
            return ApiResponseBuilder.create_success_response('No Experience records fetched')
        return ApiResponseBuilder.create_success_response(
            [ExperienceRecordOut.model_validate(r) for r in records]
        )
    except Exception as e:
        return ApiResponseBuilder.create_error_response(e, 'Failed to retrieve experience records')


async def get_all_educational_records() -> ResponseData[Union[List[EducationalRecordOut], str]]:
    """Retrieve all educational records.

    Same contract as `get_all_experience_records` for the education table.
    """
    try:
        records_repository = RecordsRepository(EDUCATION)
        records_service = RecordsService(records_repository, EDUCATION)
        records = await records_service.get_all_educational_records()
        if not records:
            return ApiResponseBuilder.create_success_response('No Educational records fetched')
        return ApiResponseBuilder.create_success_response(
            [EducationalRecordOut.model_validate(r) for r in records]
        )
    except Exception as e:
        return ApiResponseBuilder.create_error_response(e, 'Failed to retrieve educational records')


async def get_experience_record_by_id(record_id: str) -> ResponseData[Union[ExperienceRecordOut, str]]:
    """Retrieve a single experience record by `record_id`.

    The ID is validated before any repository is built; a blank or
    non-string ID returns the 400 validation envelope.
    """
    validation_error = ApiResponseBuilder.validate_string(record_id, 'ID')
    if validation_error:
        return validation_error

    try:
        records_repository = RecordsRepository(EXPERIENCE)
        records_service = RecordsService(records_repository, EXPERIENCE)
        record = await records_service.get_experience_record_by_id(record_id)
        if record:
            return ApiResponseBuilder.create_success_response(ExperienceRecordOut.model_validate(record))
        return ApiResponseBuilder.create_success_response(f'No Experience record fetched with ID: {record_id}')
    except Exception as e:
        return ApiResponseBuilder.create_error_response(e, f'Failed to retrieve experience record with ID: {record_id}')


async def get_educational_record_by_id(record_id: str) -> ResponseData[Union[EducationalRecordOut, str]]:
    """Retrieve a single educational record by `record_id`."""
    validation_error = ApiResponseBuilder.validate_string(record_id, 'ID')
    if validation_error:
        return validation_error

    try:
        records_repository = RecordsRepository(EDUCATION)
        records_service = RecordsService(records_repository, EDUCATION)
        record = await records_service.get_educational_record_by_id(record_id)
        if record:
            return ApiResponseBuilder.create_success_response(EducationalRecordOut.model_validate(record))
        return ApiResponseBuilder.create_success_response(f'No Educational record fetched with ID: {record_id}')
    except Exception as e:
        return ApiResponseBuilder.create_error_response(e, f'Failed to retrieve educational record with ID: {record_id}')


class RecordsController:
    """Namespace grouping the four record handlers."""
    get_all_experience_records = staticmethod(get_all_experience_records)
    get_all_educational_records = staticmethod(get_all_educational_records)
    get_experience_record_by_id = staticmethod(get_experience_record_by_id)
    get_educational_record_by_id = staticmethod(get_educational_record_by_id)
