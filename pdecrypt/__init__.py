"""
pdecrypt

Decrypt a directory of password protected PDFs using passwords derived from a
date of birth and a national ID.
"""

from pdecrypt.core.decryptor import BatchDecryptor
from pdecrypt.core.generator import (
    BirthdatePasswordGenerator,
    generate_candidates,
    parse_date_of_birth,
    parse_national_id,
)
from pdecrypt.core.worker import PasswordTester

__version__ = "0.1.0"
