"""Helpers for the console's toggle switches."""

from __future__ import annotations

from typing import Protocol


class Switch(Protocol):
    def is_checked(self) -> bool: ...

    def click(self) -> None: ...


def sync_switch(switch: Switch, checked: bool) -> bool:
    """Click ``switch`` once if its state differs from ``checked``. Returns True if clicked."""
    current = switch.is_checked()
    if (current and checked == False) or (not current and checked == True):  # noqa: E712
        switch.click()
        return True
    return False
