"""
Reward rules: loading a repository's values.csv, and finding the rule
that applies to a contribution.

A values.csv looks like this::

    # contribution_type,role,base_value,member_multiplier,non_member_multiplier
    commit,contributor,10,1.0,0.5
    commit,maintainer,15,1.0,0.5
    pull_request_merged,contributor,50,1.5,1.0

"""

import csv
import logging
import math
from typing import List, Optional

from deco_value_oracle.exceptions import NoRulesDefined, RuleSourceUnavailable
from deco_value_oracle.types import Rule, RuleTable

logger = logging.getLogger(__name__)

# The role whose rules apply when there is no rule for the contributor's own role.
FALLBACK_ROLE = "contributor"

RULE_FIELDS = 5


def _parse_amount(name: str, text: str) -> float:
    value = float(text)
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a non-negative number, not {text!r}")
    return value


def parse_rule_row(fields: List[str]) -> Rule:
    """
    Make a Rule from the fields of one values.csv row.

    Raises:
        ValueError: if the row doesn't describe a rule.
    """
    if len(fields) != RULE_FIELDS:
        raise ValueError(f"expected {RULE_FIELDS} fields, got {len(fields)}")
    contribution_type, role, base, member, non_member = (f.strip() for f in fields)
    if not contribution_type or not role:
        raise ValueError("contribution type and role can't be empty")
    return Rule(
        contribution_type=contribution_type,
        role=role,
        base_value=_parse_amount("base value", base),
        member_reaction_multiplier=_parse_amount("member multiplier", member),
        non_member_reaction_multiplier=_parse_amount("non-member multiplier", non_member),
    )


def load_rule_table(text: str) -> RuleTable:
    """
    Parse the text of a values.csv into a rule table.

    Comment rows (first field starting with "#") and blank rows are ignored.
    Rows that aren't valid rules are logged and skipped.  A later row for the
    same (contribution type, role) replaces an earlier one.

    Raises:
        RuleSourceUnavailable: if the text isn't parseable as CSV.
        NoRulesDefined: if no valid rules were found.
    """
    # Excel's "CSV UTF-8" starts the file with a byte order mark.
    text = text.lstrip("\ufeff")
    rules: RuleTable = {}
    try:
        for line_num, fields in enumerate(csv.reader(text.splitlines()), start=1):
            if not fields or not any(f.strip() for f in fields):
                continue
            if fields[0].strip().startswith("#"):
                continue
            try:
                rule = parse_rule_row(fields)
            except ValueError as exc:
                logger.warning(f"Skipping malformed values.csv line {line_num} ({exc}): {','.join(fields)}")
                continue
            if rule.key in rules:
                logger.info(f"values.csv line {line_num} replaces the earlier rule for {rule.key}")
            rules[rule.key] = rule
    except csv.Error as exc:
        raise RuleSourceUnavailable(f"values.csv isn't valid CSV: {exc}") from exc

    if not rules:
        raise NoRulesDefined()
    logger.info(f"values.csv loaded. Rules count: {len(rules)}")
    return rules


def resolve_rule(rules: RuleTable, contribution_type: str, role: str) -> Optional[Rule]:
    """
    Find the rule for a contribution by someone with a role.

    The rule for the exact role wins; otherwise the generic contributor rule
    for the contribution type applies.  Returns None if neither exists.
    """
    contribution_type = str(contribution_type)
    rule = rules.get((contribution_type, role))
    if rule is not None:
        return rule
    if role != FALLBACK_ROLE:
        logger.warning(
            f"No specific rule found for type {contribution_type!r} and role {role!r}. "
            f"Trying the general {FALLBACK_ROLE!r} rule."
        )
    rule = rules.get((contribution_type, FALLBACK_ROLE))
    if rule is None:
        logger.warning(f"No rule found for contribution type {contribution_type!r} at all.")
    return rule
