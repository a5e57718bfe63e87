"""Tests for tag dispatch and switch syncing."""

from bmcpage.page.renderers import FeatureTag, RendererRegistry
from bmcpage.page.widgets import sync_switch


def test_dispatch_by_enum_or_string():
    seen = []
    registry = RendererRegistry({FeatureTag.SDCARD: seen.append})
    assert registry.dispatch("sdcard", {"total": 8}) is True
    assert registry.dispatch(FeatureTag.SDCARD, {"total": 16}) is True
    assert seen == [{"total": 8}, {"total": 16}]


def test_unknown_tag_is_noop():
    registry = RendererRegistry()
    assert registry.get("bogus-tag") is None
    assert registry.dispatch("bogus-tag", {"x": 1}) is False


def test_open_tag_set():
    seen = []
    registry = RendererRegistry()
    registry.register("firmware", seen.append)
    assert "firmware" in registry
    registry.dispatch("firmware", {"version": "2.0"})
    registry.unregister("firmware")
    registry.dispatch("firmware", {"version": "2.1"})
    assert seen == [{"version": "2.0"}]


class FakeSwitch:
    def __init__(self, checked):
        self.checked = checked
        self.clicks = 0

    def is_checked(self):
        return self.checked

    def click(self):
        self.clicks += 1
        self.checked = not self.checked


def test_sync_switch_flips_when_different():
    switch = FakeSwitch(False)
    assert sync_switch(switch, True) is True
    assert switch.checked is True
    assert switch.clicks == 1


def test_sync_switch_leaves_matching_state():
    switch = FakeSwitch(True)
    assert sync_switch(switch, True) is False
    assert sync_switch(switch, 1) is False
    assert switch.clicks == 0


def test_sync_switch_ignores_non_boolean_target():
    switch = FakeSwitch(True)
    assert sync_switch(switch, None) is False
    assert switch.clicks == 0
