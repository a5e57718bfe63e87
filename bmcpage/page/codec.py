"""Conversions between UI booleans and the 0/1 flags the firmware speaks."""

from __future__ import annotations

from typing import Any


def to_wire(value: Any) -> int:
    if value == False:  # noqa: E712
        return 0
    return 1


def from_wire(value: Any) -> bool:
    """Only a value equal to 0 decodes to False; "0", None and [] all decode to True."""
    if value == 0:
        return False
    return True
