from bras import CPF
from bras.settings import Settings, settings


def test_repeated_digits_are_rejected_by_default(monkeypatch):
    monkeypatch.delenv('BRAS_REJECT_REPEATED_DIGITS', raising=False)
    assert Settings(_env_file=None).reject_repeated_digits is True


def test_policy_from_environment(monkeypatch):
    monkeypatch.setenv('BRAS_REJECT_REPEATED_DIGITS', 'false')
    assert Settings(_env_file=None).reject_repeated_digits is False


def test_policy_is_read_at_validation_time(accept_repeated_digits):
    assert settings.reject_repeated_digits is False
    assert CPF('55555555555').value == 55555555555


def test_dotenv_file_is_not_read(monkeypatch, tmp_path):
    monkeypatch.delenv('BRAS_REJECT_REPEATED_DIGITS', raising=False)
    (tmp_path / '.env').write_text('BRAS_REJECT_REPEATED_DIGITS=maybe\n')
    monkeypatch.chdir(tmp_path)
    assert Settings().reject_repeated_digits is True
