"""
Core functionality for pdecrypt.
"""

from .codec import PikePDFCodec
from .decryptor import BatchDecryptor, create_output_dir, find_pdf_files
from .generator import (
    BirthdatePasswordGenerator,
    generate_candidates,
    parse_date_of_birth,
    parse_national_id,
)
from .models import BatchOutcome, DecryptedFile, DecryptionResult, FailedFile
from .store import PasswordListStore
from .worker import attempt_password, decrypt_file, PasswordTester
