import pytest

from bmcpage.page import Dispatcher, MemorySessionStore, NotificationStore, RendererRegistry

BASE = "http://bmc.local"


@pytest.fixture
def toasts():
    return []


@pytest.fixture
def session():
    return MemorySessionStore()


@pytest.fixture
def notifications(session, toasts):
    return NotificationStore(session, toasts.append)


@pytest.fixture
def rendered():
    return []


@pytest.fixture
def alerts():
    return []


@pytest.fixture
def dispatcher(notifications, rendered, alerts):
    registry = RendererRegistry({
        "usb": lambda payload: rendered.append(("usb", payload)),
        "power": lambda payload: rendered.append(("power", payload)),
        "nodeinfo": lambda payload: rendered.append(("nodeinfo", payload)),
    })
    return Dispatcher(notifications, registry, base_url=BASE, on_transport_error=alerts.append)
