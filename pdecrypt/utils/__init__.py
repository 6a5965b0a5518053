"""
Utility modules for pdecrypt.
"""

from .config import Config, verbosity_to_level
from .exceptions import (
    PDecryptError,
    InvalidInputError,
    InvalidDateError,
    InvalidNationalIDError,
    PasswordListError,
    ConfigError,
    InputDirectoryError,
    OutputDirectoryError,
    OutputDirectoryExistsError,
)
from .logger import Logger, get_default_logger
from .paths import default_output_dir, expand_path
