import pytest
from pydantic import ValidationError

from maglev.env import Env, configure_logging, load_env
from maglev.logging import LogLevel, StreamType


@pytest.fixture
def clean_environment(monkeypatch, tmp_path):
    for envar_name in Env.types_map():
        monkeypatch.delenv(envar_name, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestEnvDefaults:
    def test_defaults(self):
        env = Env()

        assert env.MAGLEV_TABLE_SIZE == 65537
        assert env.MAGLEV_HASH_FUNCTION == "sha256"
        assert env.MAGLEV_REMOVAL_POLICY == "preserve"
        assert env.MAGLEV_LOAD_FACTOR == 100
        assert env.MAGLEV_LOG_LEVEL == "info"
        assert env.MAGLEV_LOG_OUTPUT == "stderr"
        assert env.MAGLEV_LOG_FORMAT == "template"

    def test_types_map_covers_fields(self):
        assert set(Env.types_map()) == set(Env.model_fields)

    def test_hash_function_is_normalized(self):
        assert Env(MAGLEV_HASH_FUNCTION="XXH64").MAGLEV_HASH_FUNCTION == "xxh64"

    @pytest.mark.parametrize(
        "field,value",
        [
            ("MAGLEV_HASH_FUNCTION", "crc32"),
            ("MAGLEV_REMOVAL_POLICY", "shuffle"),
            ("MAGLEV_LOAD_FACTOR", 0),
            ("MAGLEV_LOG_LEVEL", "verbose"),
            ("MAGLEV_LOG_OUTPUT", "file"),
            ("MAGLEV_LOG_FORMAT", "xml"),
            ("MAGLEV_TABLE_SIZE", "65537"),
        ],
    )
    def test_rejects_invalid_values(self, field: str, value):
        with pytest.raises(ValidationError):
            Env(**{field: value})


class TestLoadEnv:
    def test_without_sources(self, clean_environment):
        assert load_env(Env) == Env()

    def test_reads_environment_variables(self, clean_environment, monkeypatch):
        monkeypatch.setenv("MAGLEV_TABLE_SIZE", "10007")
        monkeypatch.setenv("MAGLEV_HASH_FUNCTION", "md5")

        env = load_env(Env)

        assert env.MAGLEV_TABLE_SIZE == 10007
        assert env.MAGLEV_HASH_FUNCTION == "md5"

    def test_reads_env_file(self, clean_environment):
        env_file = clean_environment / "maglev.env"
        env_file.write_text(
            "MAGLEV_TABLE_SIZE=101\n"
            "MAGLEV_REMOVAL_POLICY=swap\n"
            "UNRELATED=ignored\n"
        )

        env = load_env(Env, env_file=str(env_file))

        assert env.MAGLEV_TABLE_SIZE == 101
        assert env.MAGLEV_REMOVAL_POLICY == "swap"

    def test_default_env_file_in_working_directory(self, clean_environment):
        (clean_environment / ".env").write_text("MAGLEV_LOG_LEVEL=debug\n")

        assert load_env(Env).MAGLEV_LOG_LEVEL == "debug"

    def test_env_file_overrides_environment(self, clean_environment, monkeypatch):
        monkeypatch.setenv("MAGLEV_TABLE_SIZE", "13")
        (clean_environment / ".env").write_text("MAGLEV_TABLE_SIZE=17\n")

        assert load_env(Env).MAGLEV_TABLE_SIZE == 17

    def test_override_wins(self, clean_environment, monkeypatch):
        monkeypatch.setenv("MAGLEV_TABLE_SIZE", "13")
        monkeypatch.setenv("MAGLEV_LOG_FORMAT", "json")

        env = load_env(Env, override=Env(MAGLEV_TABLE_SIZE=19))

        assert env.MAGLEV_TABLE_SIZE == 19
        assert env.MAGLEV_LOG_FORMAT == "json"


class TestConfigureLogging:
    def test_applies_logging_fields(self):
        config = configure_logging(
            Env(
                MAGLEV_LOG_LEVEL="debug",
                MAGLEV_LOG_OUTPUT="stdout",
                MAGLEV_LOG_FORMAT="json",
            )
        )

        assert config.level == LogLevel.DEBUG
        assert config.output == StreamType.STDOUT
        assert config.format == "json"
