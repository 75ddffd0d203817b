"""BaseService — shared foundation for zkmake services.

Every service receives the frozen settings and a notebook client at
construction time; nothing is read from globals afterwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from zkmake.services.result import ServiceError, ServiceResult, Severity

if TYPE_CHECKING:
    from zkmake.config.settings import ZkmakeSettings
    from zkmake.infrastructure.zk import NotebookClient


class BaseService:
    """Base for service-layer classes.

    Usage::

        class MakeService(BaseService):
            def make(self, buffer: str, line: str, cursor: int) -> ServiceResult:
                notes = self._client.list_notes(...)
                ...
    """

    def __init__(self, client: NotebookClient, settings: ZkmakeSettings) -> None:
        self._client = client
        self._settings = settings

    @staticmethod
    def _fail(
        op: str,
        code: str,
        message: str,
        *,
        severity: Severity = "error",
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Build a failed ServiceResult."""
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=code,
                message=message,
                severity=severity,
                detail=detail or {},
            ),
        )
