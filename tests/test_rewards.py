"""Tests of rewards.py"""

import dataclasses

import pytest
import requests

from deco_value_oracle.classify import classify_event
from deco_value_oracle.exceptions import LedgerDispatchFailed
from deco_value_oracle.rewards import Ledger, calculate_reward, dispatch_reward
from deco_value_oracle.types import Rule

from . import settings as test_settings
from .helpers import push_event


@pytest.mark.parametrize("rule", [
    Rule("commit", "contributor", 10.0, 1.0, 0.5),
    Rule("commit", "maintainer", 0.0, 3.0, 2.0),
    Rule("suggestion", "contributor", 2.75, 0.0, 0.0),
])
def test_reward_is_base_value(rule):
    assert calculate_reward(rule) == rule.base_value
    assert calculate_reward(rule) == calculate_reward(rule)


def test_mint(settings, fake_ledger):
    Ledger(settings).mint("alice", 10.0, "testdeco.near")
    assert fake_ledger.mints == [{
        "body": {"account_id": "alice", "amount": 10.0, "contract_id": "testdeco.near"},
        "authorization": f"Bearer {test_settings.LEDGER_API_TOKEN}",
    }]


@pytest.mark.parametrize("status", [400, 500, 503])
def test_mint_refused(settings, fake_ledger, status):
    fake_ledger.fail_with = status
    with pytest.raises(LedgerDispatchFailed, match="Minting 10.0 for alice failed"):
        Ledger(settings).mint("alice", 10.0, "testdeco.near")


def test_mint_unreachable(settings, requests_mocker):
    requests_mocker.post(f"{test_settings.LEDGER_URL}/mint", exc=requests.exceptions.ConnectionError)
    with pytest.raises(LedgerDispatchFailed):
        Ledger(settings).mint("alice", 10.0, "testdeco.near")


def test_mint_unconfigured(settings, requests_mocker):
    with pytest.raises(LedgerDispatchFailed, match="No ledger URL"):
        Ledger(dataclasses.replace(settings, ledger_url=None)).mint("alice", 1.0, "testdeco.near")
    with pytest.raises(LedgerDispatchFailed, match="No target contract"):
        Ledger(settings).mint("alice", 1.0, None)
    assert requests_mocker.call_count == 0


def test_dispatch_reward(settings, fake_ledger):
    event = classify_event("push", push_event(pusher="alice"))
    rule = Rule("commit", "contributor", 10.0, 1.0, 0.5)
    outcome = dispatch_reward(Ledger(settings), event, rule, 10.0, "testdeco.near")
    assert outcome.contributor == "alice"
    assert outcome.amount == 10.0
    assert outcome.target_contract == "testdeco.near"
    assert outcome.event is event
    assert outcome.rule is rule
    assert len(fake_ledger.mints) == 1
