"""
Computing rewards, and handing them to the ledger for minting.
"""

import logging

import requests

from deco_value_oracle.auth import get_ledger_session
from deco_value_oracle.config import OracleSettings
from deco_value_oracle.exceptions import LedgerDispatchFailed
from deco_value_oracle.types import ContributionEvent, RewardOutcome, Rule
from deco_value_oracle.utils import RequestFailed, log_check_response

logger = logging.getLogger(__name__)


def calculate_reward(rule: Rule) -> float:
    """
    The number of tokens a contribution earns under `rule`.

    This is the rule's base value.  The reaction multipliers aren't applied:
    webhook events don't tell us how many reactions a contribution got.
    """
    return rule.base_value


class Ledger:
    """
    The external ledger that mints reward tokens.

    The ledger service owns transaction signing and any retrying.  We make
    exactly one request per reward.
    """

    def __init__(self, settings: OracleSettings):
        self.settings = settings

    def mint(self, account_id: str, amount: float, contract_id: str) -> None:
        """
        Ask the ledger to mint `amount` tokens to `account_id` on `contract_id`.

        Raises:
            LedgerDispatchFailed: if the ledger isn't configured, can't be
                reached, or refuses the request.
        """
        if not self.settings.ledger_url:
            raise LedgerDispatchFailed("No ledger URL is configured")
        if not contract_id:
            raise LedgerDispatchFailed("No target contract is configured")

        body = {
            "account_id": account_id,
            "amount": amount,
            "contract_id": contract_id,
        }
        try:
            resp = get_ledger_session(self.settings).post("mint", json=body)
            log_check_response(resp)
        except (RequestFailed, requests.RequestException) as exc:
            raise LedgerDispatchFailed(f"Minting {amount} for {account_id} failed: {exc}") from exc


def dispatch_reward(
        ledger: Ledger,
        event: ContributionEvent,
        rule: Rule,
        amount: float,
        target_contract: str,
    ) -> RewardOutcome:
    """
    Send a computed reward to the ledger.

    Returns the RewardOutcome that was minted.
    """
    outcome = RewardOutcome(
        contributor=event.contributor,
        amount=amount,
        target_contract=target_contract,
        event=event,
        rule=rule,
    )
    logger.info(f"Minting {amount:g} tokens to {event.contributor} on contract {target_contract}...")
    ledger.mint(outcome.contributor, outcome.amount, outcome.target_contract)
    logger.info(f"Minted {amount:g} tokens to {event.contributor} for {event.source_reference}")
    return outcome
