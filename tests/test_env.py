import pytest

from announce.env import MissingEnvError, must_get_env
from announce.logger import LoggerPanic


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("ANNOUNCE_TEST_A", "ANNOUNCE_TEST_B", "ANNOUNCE_TEST_EMPTY", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_reads_value_from_dotenv(tmp_path, clean_env):
    dotenv = tmp_path / ".env"
    dotenv.write_text("ANNOUNCE_TEST_A=hello\n")
    assert must_get_env("ANNOUNCE_TEST_A", dotenv) == "hello"


def test_uses_default_dotenv_in_working_directory(tmp_path, clean_env):
    (tmp_path / ".env").write_text("ANNOUNCE_TEST_A=from-cwd\n")
    clean_env.chdir(tmp_path)
    assert must_get_env("ANNOUNCE_TEST_A") == "from-cwd"


def test_existing_environment_wins_over_dotenv(tmp_path, clean_env):
    dotenv = tmp_path / ".env"
    dotenv.write_text("ANNOUNCE_TEST_A=file\n")
    clean_env.setenv("ANNOUNCE_TEST_A", "process")
    assert must_get_env("ANNOUNCE_TEST_A", dotenv) == "process"


def test_missing_dotenv_file_raises_even_if_set(tmp_path, clean_env):
    clean_env.setenv("ANNOUNCE_TEST_A", "process")
    with pytest.raises(MissingEnvError) as info:
        must_get_env("ANNOUNCE_TEST_A", tmp_path / "absent.env")
    assert info.value.key == "ANNOUNCE_TEST_A"


def test_missing_key_raises(tmp_path, clean_env):
    dotenv = tmp_path / ".env"
    dotenv.write_text("ANNOUNCE_TEST_A=x\n")
    with pytest.raises(MissingEnvError) as info:
        must_get_env("ANNOUNCE_TEST_B", dotenv)
    assert str(info.value) == "[PANIC] missing environment variable ANNOUNCE_TEST_B"


def test_empty_value_raises(tmp_path, clean_env):
    dotenv = tmp_path / ".env"
    dotenv.write_text("ANNOUNCE_TEST_EMPTY=\n")
    with pytest.raises(MissingEnvError):
        must_get_env("ANNOUNCE_TEST_EMPTY", dotenv)


def test_error_is_a_logger_panic(tmp_path, clean_env):
    with pytest.raises(LoggerPanic):
        must_get_env("ANNOUNCE_TEST_A", tmp_path / "absent.env")


def test_debug_level_logs_found_value(tmp_path, clean_env, capsys):
    dotenv = tmp_path / ".env"
    dotenv.write_text("ANNOUNCE_TEST_A=shown\n")
    clean_env.setenv("LOG_LEVEL", "DEBUG")
    must_get_env("ANNOUNCE_TEST_A", dotenv)
    assert "found environment variable ANNOUNCE_TEST_A: shown" in capsys.readouterr().out