import pytest

from portfolio.config import DEFAULT_DATABASE_URL, Settings


def test_defaults_in_dev(monkeypatch):
    for name in ('ENV', 'DATABASE_URL', 'PROFILE_SOCIAL_LINKS', 'ALLOW_DEV_CORS'):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert s.ENV == 'dev'
    assert s.DATABASE_URL == DEFAULT_DATABASE_URL
    assert s.ALLOW_DEV_CORS is True
    assert s.PROFILE_SOCIAL_LINKS == ['https://github.com', 'https://www.linkedin.com']


def test_prod_requires_explicit_database(monkeypatch):
    monkeypatch.setenv('ENV', 'prod')
    monkeypatch.delenv('DATABASE_URL', raising=False)
    monkeypatch.delenv('ALLOW_LOCAL_DB', raising=False)
    with pytest.raises(RuntimeError):
        Settings()
    monkeypatch.setenv('ALLOW_LOCAL_DB', 'true')
    assert Settings().ENV == 'prod'


def test_social_links_must_be_urls(monkeypatch):
    monkeypatch.setenv('PROFILE_SOCIAL_LINKS', 'https://github.com/me, javascript:alert(1)')
    with pytest.raises(RuntimeError):
        Settings()


def test_tests_use_the_throwaway_database(temp_db_dir):
    from portfolio import database
    assert temp_db_dir.is_dir()
    assert str(temp_db_dir) in str(database.engine.url)
