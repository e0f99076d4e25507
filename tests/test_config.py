import pytest

from qbscript.config import get_recursion_limit, int_from_env


def test_default_recursion_limit(monkeypatch):
    monkeypatch.delenv("QB_RECURSION_LIMIT", raising=False)
    assert get_recursion_limit() == 10_000


def test_recursion_limit_from_env(monkeypatch):
    monkeypatch.setenv("QB_RECURSION_LIMIT", " 5000 ")
    assert get_recursion_limit() == 5000


@pytest.mark.parametrize("raw", ["abc", "1.5", "10", "-1"])
def test_invalid_recursion_limit(monkeypatch, raw):
    monkeypatch.setenv("QB_RECURSION_LIMIT", raw)
    with pytest.raises(ValueError, match="QB_RECURSION_LIMIT"):
        get_recursion_limit()


def test_int_from_env_blank_uses_default(monkeypatch):
    monkeypatch.setenv("QB_TEST_VALUE", "  ")
    assert int_from_env("QB_TEST_VALUE", 7) == 7
