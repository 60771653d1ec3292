"""Finding collection and reporting.

Sanitization never raises on input. Instead, every construct that gets
dropped, stripped or escaped is described by a message that goes to an
optional `report` callback and, when the caller passed an `errors` list, is
recorded there as a `SanitizeError`.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import TYPE_CHECKING

from .tokens import SanitizeError

if TYPE_CHECKING:
    from typing import Any, Protocol

    class ReportCallback(Protocol):
        def __call__(self, msg: str, *, node: Any | None = None) -> None: ...


_ERROR_SINK: ContextVar[list[SanitizeError] | None] = ContextVar("safemarkup_error_sink", default=None)


def emit_error(
    code: str,
    *,
    tag: str | None = None,
    attr: str | None = None,
    category: str = "sanitize",
    message: str | None = None,
) -> None:
    """Record a SanitizeError in the active sink.

    Errors are appended to the sink installed by `sanitize_markup(...,
    errors=[...])` or `sanitize_css(..., errors=[...])`. If no sink is
    active, this is a no-op.
    """

    sink = _ERROR_SINK.get()
    if sink is None:
        return

    sink.append(
        SanitizeError(
            str(code),
            str(message) if message is not None else str(code),
            tag=tag,
            attr=attr,
            category=str(category),
        )
    )


def report_unsafe(
    report: ReportCallback | None,
    code: str,
    msg: str,
    *,
    node: Any | None = None,
    tag: str | None = None,
    attr: str | None = None,
    category: str = "sanitize",
) -> None:
    if report is not None:
        report(msg, node=node)
    emit_error(code, tag=tag, attr=attr, category=category, message=msg)
