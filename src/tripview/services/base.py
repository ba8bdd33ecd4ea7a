"""BaseService — shared foundation for tripview services.

Every service receives the resolved :class:`TripviewSettings` at
construction time and wraps each operation with :meth:`BaseService._run`,
which turns library errors into failed results.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from tripview.errors import TripviewError
from tripview.services.result import ServiceResult

if TYPE_CHECKING:
    from tripview.config.settings import TripviewSettings

logger = structlog.get_logger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class DisplayService(BaseService):
            def format_time(self, value: str) -> ServiceResult:
                return self._run("format_time", lambda: {"text": format_time(value)})
    """

    def __init__(self, settings: TripviewSettings) -> None:
        self._settings = settings

    def _run(
        self,
        op: str,
        action: Callable[[], dict[str, Any]],
        *,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        """Execute *action* and wrap its payload (or library error) in a result.

        *warnings* are attached to the result either way.

        INVARIANT: only TripviewError is converted; other exceptions are bugs
        and propagate.
        """
        try:
            data = action()
        except TripviewError as exc:
            logger.warning("operation failed", op=op, code=exc.code, error=str(exc))
            return ServiceResult.failure(op, exc, warnings=warnings)
        logger.debug("operation completed", op=op, warnings=len(warnings or ()))
        return ServiceResult.success(op, data, warnings=warnings)
