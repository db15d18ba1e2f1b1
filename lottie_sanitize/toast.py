"""Toast notification helper for UI hosts."""
from __future__ import annotations

from typing import Optional, Protocol


class ToastHandle(Protocol):
    message: str

    def show(self) -> None:
        ...


def notify(handle: Optional[ToastHandle], message: str) -> None:
    """Show ``message`` on ``handle``; does nothing while the handle is unset."""

    if handle is None:
        return
    handle.message = message
    handle.show()
