"""
Tests for the config classes from the config module
"""
import os
from unittest.mock import patch

import pytest

from syntax_sugar.config import BaseConfig, SugarConfig
from syntax_sugar.config.config import DEFAULT_PHONE_NUMBERS

SUGAR_VARS = [
    "SYNTAX_SUGAR_DELIMITER",
    "SYNTAX_SUGAR_PREFIX",
    "SYNTAX_SUGAR_SAMPLE_PHONE_NUMBERS",
]


@pytest.fixture
def _env_setup():
    """
    declare an environment
    """
    os.environ["VAR_1"] = "value1"
    os.environ["TO_LIST_VAR"] = "A, B,C"
    yield
    del os.environ["VAR_1"]
    del os.environ["TO_LIST_VAR"]


@pytest.fixture
def _clean_sugar_env():
    """
    make sure no syntax_sugar settings leak in from the environment or a .env file
    """
    saved = {name: os.environ.pop(name) for name in SUGAR_VARS if name in os.environ}
    with patch("syntax_sugar.config.config.load_dotenv"):
        yield
    for name in SUGAR_VARS:
        os.environ.pop(name, None)
    os.environ.update(saved)


def test_create_config(_env_setup):
    """
    Test retrieving the vars and asserting their values
    """
    config = BaseConfig()
    assert config.get_env_var("VAR_1") == "value1"


def test_missing_var_returns_none(_env_setup, caplog):
    """
    A missing var logs a warning and returns None
    """
    config = BaseConfig()
    assert config.get_env_var("VAR_THAT_DOES_NOT_EXIST") is None
    assert "VAR_THAT_DOES_NOT_EXIST" in caplog.text


def test_get_var_as_list(_env_setup):
    """
    Reading a var as a list leaves the stored value alone
    """
    config = BaseConfig()
    assert config.get_var_as_list("TO_LIST_VAR") == ["A", "B", "C"]
    assert config.get_env_var("TO_LIST_VAR") == "A, B,C"
    assert config.get_var_as_list("VAR_THAT_DOES_NOT_EXIST") is None


def test_load_dotenv_called():
    """
    Creating a config loads the .env file
    """
    with patch("syntax_sugar.config.config.load_dotenv") as mock_load:
        BaseConfig()
    mock_load.assert_called_once()


class TestSugarConfig:
    """Tests for SugarConfig."""

    def test_defaults(self, _clean_sugar_env):
        """Without settings the built-in samples are used."""
        config = SugarConfig()
        assert config.delimiter == "-"
        assert config.prefix == "B"
        assert config.phone_numbers == DEFAULT_PHONE_NUMBERS
        config.validate_env_vars()

    def test_overrides(self, _clean_sugar_env):
        """Settings from the environment win over the defaults."""
        os.environ["SYNTAX_SUGAR_DELIMITER"] = "."
        os.environ["SYNTAX_SUGAR_PREFIX"] = "G"
        os.environ["SYNTAX_SUGAR_SAMPLE_PHONE_NUMBERS"] = "555.123.1234, 555.000.0000"

        config = SugarConfig()

        assert config.delimiter == "."
        assert config.prefix == "G"
        assert config.phone_numbers == ["555.123.1234", "555.000.0000"]

    def test_phone_numbers_default_is_a_copy(self, _clean_sugar_env):
        """Mutating the returned samples doesn't change the defaults."""
        SugarConfig().phone_numbers.append("000-000-0000")
        assert len(DEFAULT_PHONE_NUMBERS) == 3

    def test_empty_delimiter_rejected(self, _clean_sugar_env):
        """An empty delimiter fails validation."""
        os.environ["SYNTAX_SUGAR_DELIMITER"] = ""
        with pytest.raises(ValueError):
            SugarConfig().validate_env_vars()

    def test_empty_prefix_rejected(self, _clean_sugar_env):
        """An empty prefix is kept as set and fails validation like the delimiter."""
        os.environ["SYNTAX_SUGAR_PREFIX"] = ""
        config = SugarConfig()
        assert config.prefix == ""
        with pytest.raises(ValueError):
            config.validate_env_vars()

    def test_defaults_log_missing_vars(self, _clean_sugar_env, caplog):
        """Falling back to a default logs which variable was unset."""
        config = SugarConfig()
        assert config.delimiter == "-"
        assert config.prefix == "B"
        assert "SYNTAX_SUGAR_DELIMITER" in caplog.text
        assert "SYNTAX_SUGAR_PREFIX" in caplog.text
