from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class ImportFailureKind(StrEnum):
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    IO_ERROR = "IO_ERROR"
    UNKNOWN = "UNKNOWN"


class ImportFailure(BaseModel):
    """Terminal error of a single file import.

    Entries committed before the failure stay in the phone book.
    """

    kind: ImportFailureKind
    message: str | None = None
