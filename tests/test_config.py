import pytest

from dom_testing import QueryConfig


def test_defaults():
    config = QueryConfig()

    assert config.debug is False
    assert config.dedupe_text_matches is True


def test_from_env(monkeypatch):
    monkeypatch.setenv('DOM_TESTING_DEBUG', 'true')
    monkeypatch.setenv('DOM_TESTING_DEDUPE', '0')

    config = QueryConfig.from_env()

    assert config.debug is True
    assert config.dedupe_text_matches is False


def test_from_env_without_variables(monkeypatch):
    monkeypatch.delenv('DOM_TESTING_DEBUG', raising=False)
    monkeypatch.delenv('DOM_TESTING_DEDUPE', raising=False)

    assert QueryConfig.from_env() == QueryConfig()


def test_from_env_rejects_garbage(monkeypatch):
    monkeypatch.setenv('DOM_TESTING_DEBUG', 'maybe')

    with pytest.raises(ValueError):
        QueryConfig.from_env()


def test_dedupe_flag_reaches_text_strategy(render):
    renderer = render('<p>ab<br>ab</p>', config=QueryConfig(dedupe_text_matches=False))

    assert len(renderer.get_all_by_text_contains('ab')) == 2
