import os

import pikepdf
import pytest

from pdecrypt.core.codec import PikePDFCodec
from pdecrypt.core.models import NO_MATCHING_PASSWORD, DecryptedFile, FailedFile
from pdecrypt.core.worker import PasswordTester, attempt_password, decrypt_file

from conftest import FakeCodec, make_pdf

CANDIDATES = ("first", "second", "third", "fourth", "fifth")


@pytest.mark.parametrize("k", range(len(CANDIDATES)))
def test_attempt_stops_at_first_match(k, quiet_logger):
    codec = FakeCodec({"a.pdf": CANDIDATES[k]})
    result = PasswordTester(codec, quiet_logger).attempt("/in/a.pdf", CANDIDATES)

    assert result.ok
    assert result.password == CANDIDATES[k]
    assert result.document.password == CANDIDATES[k]
    assert [password for _, password in codec.calls] == list(CANDIDATES[: k + 1])


def test_attempt_reports_first_of_several_working_passwords(quiet_logger):
    candidates = ("nope", "same", "same")
    codec = FakeCodec({"a.pdf": "same"})
    result = PasswordTester(codec, quiet_logger).attempt("/in/a.pdf", candidates)

    assert result.password == "same"
    assert len(codec.calls) == 2


def test_attempt_without_match_fails_with_path(quiet_logger):
    codec = FakeCodec({"a.pdf": "secret"})
    result = PasswordTester(codec, quiet_logger).attempt("/in/a.pdf", CANDIDATES)

    assert not result.ok
    assert result.path == "/in/a.pdf"
    assert result.reason == NO_MATCHING_PASSWORD
    assert result.document is None
    assert len(codec.calls) == len(CANDIDATES)


def test_attempt_with_empty_list_fails(quiet_logger):
    result = PasswordTester(FakeCodec(), quiet_logger).attempt("/in/a.pdf", ())

    assert not result.ok
    assert result.reason == NO_MATCHING_PASSWORD


def test_attempt_stops_on_unreadable_file(quiet_logger):
    codec = FakeCodec(unreadable={"a.pdf"})
    result = PasswordTester(codec, quiet_logger).attempt("/in/a.pdf", CANDIDATES)

    assert not result.ok
    assert "cannot open PDF" in result.reason
    assert len(codec.calls) == 1


def test_decrypt_file_writes_under_base_name(tmp_path, quiet_logger):
    out = tmp_path / "out"
    out.mkdir()
    codec = FakeCodec({"a.pdf": "third"})

    result = decrypt_file("/in/a.pdf", CANDIDATES, str(out), codec, quiet_logger)

    assert result == DecryptedFile("/in/a.pdf", str(out / "a.pdf"), "third")
    assert (out / "a.pdf").read_bytes() == FakeCodec.content_for("a.pdf")
    assert codec.closed == ["a.pdf"]


def test_decrypt_file_reports_write_failure(tmp_path, quiet_logger):
    codec = FakeCodec({"a.pdf": "first"}, unwritable={"a.pdf"})

    result = decrypt_file("/in/a.pdf", CANDIDATES, str(tmp_path), codec, quiet_logger)

    assert isinstance(result, FailedFile)
    assert "cannot write decrypted copy" in result.reason
    assert codec.closed == ["a.pdf"]


def test_pikepdf_codec_round_trip(tmp_path):
    encrypted = make_pdf(tmp_path / "locked.pdf", password="15012543", pages=2)
    codec = PikePDFCodec()

    assert codec.try_open(encrypted, "wrong") is None
    assert attempt_password(encrypted, "15012543")
    assert not attempt_password(encrypted, "15012000")

    out = tmp_path / "out"
    out.mkdir()
    result = decrypt_file(encrypted, ("wrong", "15012543"), str(out))

    assert isinstance(result, DecryptedFile)
    assert result.password == "15012543"

    with pikepdf.open(os.path.join(str(out), "locked.pdf")) as pdf:
        assert not pdf.is_encrypted
        assert len(pdf.pages) == 2


def test_pikepdf_codec_rejects_garbage(tmp_path):
    garbage = tmp_path / "garbage.pdf"
    garbage.write_bytes(b"this is not a pdf")

    result = PasswordTester().attempt(str(garbage), CANDIDATES)

    assert not result.ok
    assert "cannot open PDF" in result.reason
