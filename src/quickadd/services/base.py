"""BaseService — shared construction and error conversion for services.

Every service receives an :class:`Environment` at construction time and
reads the home directory, clock, and platform only through it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from quickadd.services.result import ServiceResult

if TYPE_CHECKING:
    from quickadd.domain.errors import QuickAddError
    from quickadd.infrastructure.environment import Environment

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class VaultService(BaseService):
            def list_vaults(self) -> ServiceResult:
                try:
                    ...
                except QuickAddError as exc:
                    return self._failure("list_vaults", exc)
    """

    def __init__(self, env: Environment) -> None:
        self._env = env

    @staticmethod
    def _failure(op: str, exc: QuickAddError, warnings: list[str] | None = None) -> ServiceResult:
        """Convert a raised QuickAddError into a failed result."""
        logger.debug("%s failed: %s", op, exc.message)
        return ServiceResult.failure(
            op, exc.code, exc.message, detail=exc.detail, warnings=warnings
        )
