"""
Result types passed between the attempt engine and the batch decryptor.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

NO_MATCHING_PASSWORD = "no matching password"


@dataclass
class DecryptionResult:
    """Outcome of trying a candidate list against one file

    On success ``password`` and ``document`` are set; on failure only
    ``reason`` is.
    """

    path: str
    password: Optional[str] = None
    document: Any = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.password is not None

    @classmethod
    def matched(cls, path: str, password: str, document: Any) -> "DecryptionResult":
        return cls(path=path, password=password, document=document)

    @classmethod
    def failed(cls, path: str, reason: str) -> "DecryptionResult":
        return cls(path=path, reason=reason)


@dataclass(frozen=True)
class DecryptedFile:
    source: str
    destination: str
    password: str


@dataclass(frozen=True)
class FailedFile:
    source: str
    reason: str


@dataclass
class BatchOutcome:
    """Everything one decrypt run produced"""

    decrypted: List[DecryptedFile] = field(default_factory=list)
    failed: List[FailedFile] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.decrypted) + len(self.failed)

    def add(self, result) -> None:
        if isinstance(result, DecryptedFile):
            self.decrypted.append(result)
        else:
            self.failed.append(result)

    def report(self) -> List[str]:
        """Human readable summary, one failed file per line"""
        lines = [f"Decrypted {len(self.decrypted)} of {self.total} PDF file(s)"]
        if self.failed:
            lines.append(f"Failed to decrypt {len(self.failed)} file(s):")
            for failure in sorted(self.failed, key=lambda f: f.source):
                lines.append(f"  {failure.source}: {failure.reason}")
        return lines
