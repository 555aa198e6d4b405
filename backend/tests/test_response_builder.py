import logging

import pytest
from pydantic import ValidationError

from portfolio.schemas import ResponseData
from portfolio.utils.response_builder import ApiResponseBuilder


def test_success_response_wraps_payload():
    res = ApiResponseBuilder.create_success_response({'a': 1})
    assert res.status == 200
    assert res.data == {'a': 1}
    assert res.error is None
    assert res.ok


def test_error_response_hides_exception_text(caplog):
    with caplog.at_level(logging.ERROR, logger="portfolio.api"):
        res = ApiResponseBuilder.create_error_response(RuntimeError('password=hunter2'), 'Failed to do the thing')
    assert res.status == 500
    assert res.data is None
    assert res.error == 'Failed to do the thing'
    assert 'hunter2' not in res.model_dump_json()
    assert 'Failed to do the thing' in caplog.text


@pytest.mark.parametrize('value', ['', '   ', '\t\n', None, 42, ['abc']])
def test_validate_string_rejects_blank_and_non_strings(value):
    res = ApiResponseBuilder.validate_string(value, 'ID')
    assert res is not None
    assert res.status == 400
    assert res.error == 'Invalid ID: must be a non-empty string'


def test_validate_string_accepts_text():
    assert ApiResponseBuilder.validate_string(' abc ', 'ID') is None


def test_success_response_requires_payload():
    with pytest.raises(ValueError):
        ApiResponseBuilder.create_success_response(None)


@pytest.mark.parametrize('fields', [
    {'status': 200},
    {'status': 500, 'data': 'x', 'error': 'y'},
])
def test_envelope_carries_exactly_one_of_data_or_error(fields):
    with pytest.raises(ValidationError):
        ResponseData(**fields)
