"""Tests of code in utils.py"""

import pytest
import requests

from deco_value_oracle.utils import (
    RequestFailed,
    log_check_response,
    sentry_extra_context,
    text_summary,
)


@pytest.mark.parametrize("args, summary", [
    (["Hello"], "Hello"),
    ([""], ""),
    (["lorem ipsum quia dolor sit amet consecte"], "lorem ipsum quia dolor sit amet consecte"),
    (["lorem ipsum quia dolor sit amet consectetur adipisci velit, sed quia non numquam eius modi tempora incidunt."],
      "lorem ipsum quia d...i tempora incidunt."),
    (["lorem ipsum quia dolor sit amet consectetur adipisci velit, quia non numquam eius modi tempora incidunt.", 80],
      "lorem ipsum quia dolor sit amet consec...non numquam eius modi tempora incidunt."),
])
def test_text_summary(args, summary):
    assert summary == text_summary(*args)


def test_log_check_response_ok(requests_mocker):
    requests_mocker.get("https://api.github.com/thing", json={"ok": True})
    log_check_response(requests.get("https://api.github.com/thing"))


def test_log_check_response_failure(requests_mocker):
    requests_mocker.get("https://api.github.com/thing", status_code=502, text="Bad gateway")
    resp = requests.get("https://api.github.com/thing")
    with pytest.raises(RequestFailed, match="GET https://api.github.com/thing"):
        log_check_response(resp)
    # Without raise_for_status, only logging happens.
    log_check_response(resp, raise_for_status=False)


def test_sentry_extra_context(mocker):
    set_extra = mocker.patch("deco_value_oracle.utils.sentry_sdk.set_extra")
    sentry_extra_context({"event_type": "push", "delivery": "abc-123"})
    set_extra.assert_has_calls([
        mocker.call("event_type", "push"),
        mocker.call("delivery", "abc-123"),
    ])
