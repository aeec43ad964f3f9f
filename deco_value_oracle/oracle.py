"""
The reward pipeline for one webhook delivery.
"""

import functools
import logging

from deco_value_oracle import info
from deco_value_oracle.classify import classify_event, describe_non_actionable
from deco_value_oracle.config import OracleSettings
from deco_value_oracle.rewards import Ledger, calculate_reward, dispatch_reward
from deco_value_oracle.rules import load_rule_table, resolve_rule
from deco_value_oracle.types import DistributionResult, Outcome, PayloadDict

logger = logging.getLogger(__name__)


class RewardOracle:
    """
    Turn a GitHub webhook event into minted reward tokens.

    An oracle is made for a single delivery and thrown away afterwards.  The
    collaborators that touch the outside world can be replaced:

    - `fetch_rule_source(repository_url) -> str`: the text of the repo's values.csv.
    - `role_of(contributor, repository_url) -> str`: the contributor's role.
    - `ledger`: an object with a `mint(account_id, amount, contract_id)` method.

    By default they talk to GitHub and the configured ledger.
    """

    def __init__(self, settings: OracleSettings, fetch_rule_source=None, role_of=None, ledger=None):
        self.settings = settings
        self.fetch_rule_source = fetch_rule_source or functools.partial(info.fetch_rule_source, settings)
        self.role_of = role_of or functools.partial(info.get_contributor_role, settings)
        self.ledger = ledger or Ledger(settings)

    def process(self, event_type: str, payload: PayloadDict) -> DistributionResult:
        """
        Classify, resolve, calculate, and dispatch.

        Returns a DistributionResult for the successful endings: the event
        earns nothing, there's no rule for it, or the reward was dispatched.

        Raises:
            OracleError: for failures, which the caller reports with the
                error's status code.
        """
        event = classify_event(event_type, payload)
        if event is None:
            msg = describe_non_actionable(event_type, payload)
            logger.info(msg)
            return DistributionResult(Outcome.NON_ACTIONABLE, msg)

        logger.info(f"Classified {event_type} event as {event} ({event.source_reference})")

        rules = load_rule_table(self.fetch_rule_source(event.repository_url))
        role = self.role_of(event.contributor, event.repository_url)
        rule = resolve_rule(rules, event.contribution_type, role)
        if rule is None:
            msg = f"No rule found for {str(event.contribution_type)!r}. No reward issued."
            return DistributionResult(Outcome.NO_APPLICABLE_RULE, msg)

        amount = calculate_reward(rule)
        logger.info(
            f"Calculated {amount:g} tokens for {event.contributor} ({role}) "
            f"of type {event.contribution_type}."
        )
        reward = dispatch_reward(self.ledger, event, rule, amount, self.settings.contract_id)
        msg = (
            f"Reward calculation initiated for {event.contributor}. "
            "Check the ledger for minting status."
        )
        return DistributionResult(Outcome.REWARD_DISPATCHED, msg, reward=reward)
