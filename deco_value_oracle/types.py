"""Types specific to deco_value_oracle."""

from __future__ import annotations

import dataclasses
import enum
from typing import Dict, Optional, Tuple


# A webhook payload as described by a JSON object.
PayloadDict = Dict

# The composite key of a rule: (contribution type, role).
RuleKey = Tuple[str, str]


class ContributionType(str, enum.Enum):
    """The kinds of contribution that can earn a reward."""
    COMMIT = "commit"
    PULL_REQUEST_MERGED = "pull_request_merged"
    ISSUE_REPORT_CRITICAL = "issue_report_critical"
    ISSUE_REPORT_MINOR = "issue_report_minor"
    SUGGESTION = "suggestion"

    def __str__(self):
        return self.value


@dataclasses.dataclass(frozen=True)
class ContributionEvent:
    """A webhook event that has been classified as a rewardable contribution."""
    repository_url: str
    contributor: str
    contribution_type: ContributionType

    # Git ref, pull request URL, or issue/comment URL. Only for the logs.
    source_reference: str

    # The X-GitHub-Event type this was classified from.
    event_type: str = ""

    def __str__(self):
        return f"{self.contribution_type} by @{self.contributor} in {self.repository_url}"


@dataclasses.dataclass(frozen=True)
class Rule:
    """One row of a repository's values.csv."""
    contribution_type: str
    role: str
    base_value: float

    # Reserved for reaction-weighted scoring, which isn't computed yet.
    member_reaction_multiplier: float = 1.0
    non_member_reaction_multiplier: float = 1.0

    @property
    def key(self) -> RuleKey:
        return (self.contribution_type, self.role)


# The rules for one repository, keyed by (contribution type, role).
RuleTable = Dict[RuleKey, Rule]


@dataclasses.dataclass(frozen=True)
class RewardOutcome:
    """A reward computed for a contributor, on its way to the ledger."""
    contributor: str
    amount: float
    target_contract: str
    event: ContributionEvent
    rule: Rule


class Outcome(enum.Enum):
    """How a webhook delivery finished, when it didn't fail."""
    NON_ACTIONABLE = "non_actionable"
    NO_APPLICABLE_RULE = "no_applicable_rule"
    REWARD_DISPATCHED = "reward_dispatched"


@dataclasses.dataclass(frozen=True)
class DistributionResult:
    outcome: Outcome
    message: str
    status_code: int = 200
    reward: Optional[RewardOutcome] = None
