"""
Config classes that read settings from the environment and/or a .env file.
"""
import os
from abc import abstractmethod
from typing import List, Optional
import logging
from dotenv import load_dotenv

from syntax_sugar.text import DELIMITER

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = 'B'
DEFAULT_PHONE_NUMBERS = ['111-111-1111', '123-123-1234', '555-123-1234']


class BaseConfig():
    """
    Config class that allows to use a .env file on top of the environment.
    """
    def __init__(self):
        load_dotenv()
        # Get all environment variables and store them in a dictionary
        self.env_vars = {key: os.getenv(key) for key in os.environ}

    def get_env_var(self, var_name: str):
        """
        Retrieve the value of the specified environment variable
        Args:
            var_name (str) : Name of the env var to fetch
        """
        if var_name in self.env_vars.keys():
            return self.env_vars[var_name]
        else:
            logger.warning("Variable %s not found.", var_name)
            return None

    def get_var_as_list(self, var_name: str) -> Optional[List[str]]:
        """
        Returns a comma-delimited var as list
        """
        if var_name in self.env_vars.keys():
            try:
                return [env_var.strip() for env_var in self.env_vars[var_name].split(",")]
            except AttributeError:
                logger.error(
                    "Error: Invalid input format. Please provide a comma-delimited string.")
                return None
        logger.warning("Warning: var %s not found.", var_name)
        return None

    @abstractmethod
    def validate_env_vars(self):
        """
        Abstract method for validation of the env vars.
        """


class SugarConfig(BaseConfig):
    """
    Settings for the syntax_sugar demonstrations.

    Reads SYNTAX_SUGAR_DELIMITER, SYNTAX_SUGAR_PREFIX and
    SYNTAX_SUGAR_SAMPLE_PHONE_NUMBERS, falling back to the built-in samples.
    """

    @property
    def delimiter(self) -> str:
        delimiter = self.get_env_var('SYNTAX_SUGAR_DELIMITER')
        return DELIMITER if delimiter is None else delimiter

    @property
    def prefix(self) -> str:
        prefix = self.get_env_var('SYNTAX_SUGAR_PREFIX')
        return DEFAULT_PREFIX if prefix is None else prefix

    @property
    def phone_numbers(self) -> List[str]:
        phone_numbers = self.get_var_as_list('SYNTAX_SUGAR_SAMPLE_PHONE_NUMBERS')
        return list(DEFAULT_PHONE_NUMBERS) if phone_numbers is None else phone_numbers

    def validate_env_vars(self):
        """
        Empty values are rejected; unset values fall back to the defaults.
        """
        if not self.delimiter:
            raise ValueError("SYNTAX_SUGAR_DELIMITER must not be empty")
        if not self.prefix:
            raise ValueError("SYNTAX_SUGAR_PREFIX must not be empty")
