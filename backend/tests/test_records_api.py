from fastapi.testclient import TestClient

from portfolio.main import app
from portfolio.services import RecordsService

client = TestClient(app)


def test_list_endpoints_with_records(seed_records):
    r = client.get('/records/experience')
    assert r.status_code == 200
    body = r.json()
    assert body['status'] == 200
    assert body['error'] is None
    assert [item['id'] for item in body['data']] == ['exp-new', 'exp-old']
    assert body['data'][0]['end_date'] is None

    r2 = client.get('/records/education')
    assert r2.status_code == 200
    assert r2.json()['data'][0]['field_of_study'] == 'Computer Science'


def test_list_endpoints_empty():
    r = client.get('/records/education')
    assert r.status_code == 200
    assert r.json() == {'status': 200, 'data': 'No Educational records fetched', 'error': None}


def test_get_by_id_found_and_missing(seed_records):
    r = client.get('/records/experience/exp-new')
    assert r.status_code == 200
    assert r.json()['data']['title'] == 'Backend Engineer'
    missing = client.get('/records/education/nope')
    assert missing.status_code == 200
    assert missing.json()['data'] == 'No Educational record fetched with ID: nope'


def test_blank_id_is_rejected():
    r = client.get('/records/experience/%20%20')
    assert r.status_code == 400
    assert r.json() == {'status': 400, 'data': None, 'error': 'Invalid ID: must be a non-empty string'}


def test_fetch_failure_maps_to_500(monkeypatch):
    async def _boom(self):
        raise RuntimeError('disk I/O error')
    monkeypatch.setattr(RecordsService, 'get_all_experience_records', _boom)
    r = client.get('/records/experience')
    assert r.status_code == 500
    assert r.json()['error'] == 'Failed to retrieve experience records'
    assert 'disk' not in r.text


def test_request_id_is_echoed():
    r = client.get('/records/experience', headers={'X-Request-ID': 'abc123'})
    assert r.headers['X-Request-ID'] == 'abc123'
    generated = client.get('/health')
    assert generated.json() == {'status': 'ok'}
    assert len(generated.headers['X-Request-ID']) == 32
