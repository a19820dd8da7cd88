"""Error codes and the exception hierarchy raised below the service layer.

Infrastructure raises these; services catch :class:`QuickAddError` and turn
it into a failed ``ServiceResult``. Nothing here is process-fatal.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Stable error codes surfaced in ``ServiceError.code``."""

    HOME_DIRECTORY_UNRESOLVABLE = "HOME_DIRECTORY_UNRESOLVABLE"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
    DIRECTORY_CREATE_ERROR = "DIRECTORY_CREATE_ERROR"
    FILE_READ_ERROR = "FILE_READ_ERROR"
    FILE_WRITE_ERROR = "FILE_WRITE_ERROR"
    VAULT_NOT_FOUND = "VAULT_NOT_FOUND"
    VAULT_AMBIGUOUS = "VAULT_AMBIGUOUS"
    NO_VAULTS = "NO_VAULTS"
    INVALID_INPUT = "INVALID_INPUT"


class QuickAddError(Exception):
    """Base error carrying a code, a human message, and structured detail."""

    code: ErrorCode = ErrorCode.INVALID_INPUT

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail or {}


class HomeDirectoryUnresolvable(QuickAddError):
    code = ErrorCode.HOME_DIRECTORY_UNRESOLVABLE


class ConfigNotFound(QuickAddError):
    code = ErrorCode.CONFIG_NOT_FOUND


class ConfigParseError(QuickAddError):
    code = ErrorCode.CONFIG_PARSE_ERROR


class DirectoryCreateError(QuickAddError):
    code = ErrorCode.DIRECTORY_CREATE_ERROR


class FileReadError(QuickAddError):
    code = ErrorCode.FILE_READ_ERROR


class FileWriteError(QuickAddError):
    code = ErrorCode.FILE_WRITE_ERROR
