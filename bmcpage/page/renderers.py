"""Routing of parsed GET payloads to the page that displays them."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, Iterator, Optional, Union

logger = logging.getLogger(__name__)

Renderer = Callable[[Any], None]


class FeatureTag(str, Enum):
    """Tags of the console pages that render device state"""
    USB = "usb"
    SDCARD = "sdcard"
    OTHER = "other"
    POWER = "power"
    NODEINFO = "nodeinfo"


def _tag_key(tag: Union[FeatureTag, str]) -> str:
    if isinstance(tag, FeatureTag):
        return tag.value
    return str(tag)


class RendererRegistry:
    """Explicit tag -> renderer table. The set of tags is open."""

    def __init__(self, renderers: Optional[Dict[Union[FeatureTag, str], Renderer]] = None) -> None:
        self._renderers: Dict[str, Renderer] = {}
        for tag, renderer in (renderers or {}).items():
            self.register(tag, renderer)

    def register(self, tag: Union[FeatureTag, str], renderer: Renderer) -> None:
        self._renderers[_tag_key(tag)] = renderer

    def unregister(self, tag: Union[FeatureTag, str]) -> None:
        self._renderers.pop(_tag_key(tag), None)

    def get(self, tag: Union[FeatureTag, str]) -> Optional[Renderer]:
        return self._renderers.get(_tag_key(tag))

    def dispatch(self, tag: Union[FeatureTag, str], payload: Any) -> bool:
        """Hand ``payload`` to the renderer for ``tag``; unknown tags are dropped."""
        renderer = self.get(tag)
        if renderer is None:
            logger.debug("No renderer for tag %r, dropping payload", _tag_key(tag))
            return False
        renderer(payload)
        return True

    def __contains__(self, tag: object) -> bool:
        if not isinstance(tag, (FeatureTag, str)):
            return False
        return _tag_key(tag) in self._renderers

    def __iter__(self) -> Iterator[str]:
        return iter(self._renderers)


__all__ = ["FeatureTag", "Renderer", "RendererRegistry"]
