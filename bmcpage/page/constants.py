"""Constants shared by the page dispatcher and the notification store."""

from __future__ import annotations

from bmcpage.config import BMC_HTTP_TIMEOUT

# Session storage key holding the outcome of the last mutating request
NOTIFICATION_KEY = "Notification"

OUTCOME_OK = "ok"
OUTCOME_ERR = "err"
OUTCOME_UNSET = "unset"

# Passed in place of a response body when the POST never reached the device
URL_ERROR_SENTINEL = "urlerr"

DEFAULT_TIMEOUT = BMC_HTTP_TIMEOUT

TOAST_POSITION = "top-center"
TOAST_COLOR = "#1ea69a"
TOAST_DURATION_MS = 2000
TOAST_COUNT = 1
TOAST_ANIMATION = "slide"

TRANSPORT_ERROR_MESSAGE = "page get error"
