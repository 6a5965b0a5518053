"""
Worker module for pdecrypt.

This module holds the per-file logic: trying the candidate list against one
PDF, and the full try-then-write pipeline run for each file of a batch.
"""

import os
from typing import Sequence

from .codec import PikePDFCodec
from .models import (
    NO_MATCHING_PASSWORD,
    DecryptedFile,
    DecryptionResult,
    FailedFile,
)
from pdecrypt.utils.logger import get_default_logger


def attempt_password(pdf_path: str, password: str, codec=None) -> bool:
    """Try a single password on the PDF

    Args:
        pdf_path: Path to the PDF file
        password: Password to try
        codec: PDF codec (default: pikepdf)

    Returns:
        True if password is correct, False otherwise
    """
    codec = codec or PikePDFCodec()
    document = codec.try_open(pdf_path, password)
    if document is None:
        return False
    codec.close(document)
    return True


class PasswordTester:
    """Tries a candidate list against one PDF, in order, stopping at the first match"""

    def __init__(self, codec=None, logger=None):
        """Initialize with a PDF codec and optional logger

        Args:
            codec: Object with try_open(path, password) returning a document or None
            logger: Optional logger instance
        """
        self.codec = codec or PikePDFCodec()
        self.logger = logger or get_default_logger()

    def attempt(self, pdf_path: str, candidates: Sequence[str]) -> DecryptionResult:
        """Find the first candidate that opens the PDF

        The returned document is open and owned by the caller.

        Args:
            pdf_path: Path to the PDF file
            candidates: Passwords to try, in order

        Returns:
            A matched result with the password and open document, or a failed
            result carrying the reason
        """
        self.logger.debug(f"Trying to decrypt file: {pdf_path}")

        for index, password in enumerate(candidates):
            try:
                document = self.codec.try_open(pdf_path, password)
            except Exception as e:
                # Not a password problem, the next candidate would fail the same way
                self.logger.debug(f"Cannot open {pdf_path}: {e}")
                return DecryptionResult.failed(pdf_path, f"cannot open PDF: {e}")

            if document is not None:
                self.logger.debug(f"Opened {pdf_path} with candidate #{index}: {password}")
                return DecryptionResult.matched(pdf_path, password, document)

        return DecryptionResult.failed(pdf_path, NO_MATCHING_PASSWORD)


def decrypt_file(pdf_path: str, candidates: Sequence[str], output_dir: str,
                 codec=None, logger=None):
    """Decrypt one PDF into output_dir under its original base name

    Every failure is returned rather than raised so that one file can never
    stop its siblings.

    Returns:
        DecryptedFile on success, FailedFile otherwise
    """
    codec = codec or PikePDFCodec()
    logger = logger or get_default_logger()

    result = PasswordTester(codec, logger).attempt(pdf_path, candidates)
    if not result.ok:
        return FailedFile(pdf_path, result.reason)

    destination = os.path.join(output_dir, os.path.basename(pdf_path))
    try:
        logger.debug(f"Writing decrypted file: {destination}")
        codec.write_decrypted(result.document, destination)
    except Exception as e:
        return FailedFile(pdf_path, f"cannot write decrypted copy: {e}")
    finally:
        codec.close(result.document)

    return DecryptedFile(pdf_path, destination, result.password)

