"""VaultService — vault discovery and selection."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from quickadd.domain.errors import ErrorCode, QuickAddError
from quickadd.domain.models import Vault
from quickadd.infrastructure.environment import registry_path
from quickadd.infrastructure.registry import discover_vaults
from quickadd.services.base import BaseService
from quickadd.services.result import ServiceResult
from quickadd.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from quickadd.infrastructure.environment import Environment


class VaultService(BaseService):
    """Lists vaults from the Obsidian registry and picks one for a command."""

    def __init__(self, env: Environment, *, registry: Path | None = None) -> None:
        super().__init__(env)
        self._registry = registry

    def _registry_path(self) -> Path:
        return self._registry if self._registry is not None else registry_path(self._env)

    def _discover(self) -> list[Vault]:
        with trace_span("discover_vaults") as span:
            vaults = discover_vaults(self._registry_path())
            if span:
                span.annotate("count", len(vaults))
        return vaults

    @traced
    def list_vaults(self) -> ServiceResult:
        """Vaults in the registry that still exist on disk (unordered)."""
        try:
            vaults = self._discover()
        except QuickAddError as exc:
            return self._failure("list_vaults", exc)

        return ServiceResult(
            ok=True,
            op="list_vaults",
            data={
                "vaults": [v.model_dump() for v in vaults],
                "count": len(vaults),
            },
        )

    @traced
    def resolve_vault(self, selector: str | None = None) -> ServiceResult:
        """Pick a vault by path, registry id, or name.

        An existing directory path is used directly, without the registry.
        With no *selector*, the only registered vault is chosen.
        """
        op = "resolve_vault"
        if selector:
            candidate = Path(selector).expanduser()
            if candidate.is_dir():
                vault = Vault.from_registry(str(candidate), str(candidate))
                return ServiceResult(ok=True, op=op, data=vault.model_dump())

        try:
            vaults = self._discover()
        except QuickAddError as exc:
            return self._failure(op, exc)

        if selector:
            wanted = selector.casefold()
            matches = [v for v in vaults if v.id == selector or v.name.casefold() == wanted]
        else:
            matches = vaults

        if len(matches) == 1:
            return ServiceResult(ok=True, op=op, data=matches[0].model_dump())

        names = sorted(v.name for v in matches)
        if not matches and selector:
            code, message = ErrorCode.VAULT_NOT_FOUND, f"No vault named {selector!r}"
        elif not matches:
            code, message = ErrorCode.NO_VAULTS, "No Obsidian vaults found on disk"
        elif selector:
            code, message = ErrorCode.VAULT_AMBIGUOUS, f"{selector!r} matches several vaults"
        else:
            code, message = (
                ErrorCode.VAULT_AMBIGUOUS,
                "Several vaults found; choose one with --vault",
            )
        return ServiceResult.failure(op, code, message, detail={"candidates": names})
