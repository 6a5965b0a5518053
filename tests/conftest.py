import os

import pikepdf
import pytest

from pdecrypt.utils.logger import Logger

NATIONAL_ID = "1103700012345"


def make_pdf(path, password=None, pages=1):
    """Write a small PDF, encrypted with password when one is given"""
    pdf = pikepdf.new()
    for _ in range(pages):
        pdf.add_blank_page()
    if password is None:
        pdf.save(str(path))
    else:
        pdf.save(
            str(path),
            encryption=pikepdf.Encryption(user=password, owner=password + "-owner"),
        )
    pdf.close()
    return str(path)


class FakeDocument:
    def __init__(self, path, password):
        self.path = path
        self.password = password
        self.closed = False


class FakeCodec:
    """Codec double keyed by file base name

    passwords maps a base name to the one password that opens it.
    """

    def __init__(self, passwords=None, unreadable=(), unwritable=()):
        self.passwords = dict(passwords or {})
        self.unreadable = set(unreadable)
        self.unwritable = set(unwritable)
        self.calls = []
        self.closed = []

    def try_open(self, pdf_path, password):
        name = os.path.basename(pdf_path)
        self.calls.append((name, password))
        if name in self.unreadable:
            raise ValueError("not a PDF file")
        if self.passwords.get(name) == password:
            return FakeDocument(pdf_path, password)
        return None

    def write_decrypted(self, document, destination):
        name = os.path.basename(document.path)
        if name in self.unwritable:
            raise OSError("disk full")
        with open(destination, "wb") as f:
            f.write(self.content_for(name))

    def close(self, document):
        document.closed = True
        self.closed.append(os.path.basename(document.path))

    @staticmethod
    def content_for(name):
        return f"decrypted:{name}".encode()


@pytest.fixture
def quiet_logger():
    return Logger(name="pdecrypt.tests", console=False).get_logger()


class CrashingCodec(FakeCodec):
    """Codec whose worker process exits abruptly on the named files"""

    def __init__(self, passwords=None, crash=()):
        super().__init__(passwords)
        self.crash = set(crash)

    def try_open(self, pdf_path, password):
        if os.path.basename(pdf_path) in self.crash:
            os._exit(1)
        return super().try_open(pdf_path, password)
