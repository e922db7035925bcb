import pytest

from bras.settings import settings

VALID_CPFS = ['01678346063', '98484485439', '05119439039', '11144477735']


@pytest.fixture(params=VALID_CPFS)
def valid_cpf(request) -> str:
    return request.param


@pytest.fixture
def accept_repeated_digits(monkeypatch):
    monkeypatch.setattr(settings, 'reject_repeated_digits', False)
    yield settings
