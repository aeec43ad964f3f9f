"""
Classify incoming GitHub webhook events as contributions.

Classification is a pure function of the event type and payload: no I/O,
no state.  An event that doesn't earn anything is not an error, it just
classifies to None.
"""

import logging
from typing import Optional

from glom import glom, GlomError

from deco_value_oracle.exceptions import MalformedPayload
from deco_value_oracle.types import ContributionEvent, ContributionType, PayloadDict
from deco_value_oracle.utils import text_summary

logger = logging.getLogger(__name__)

# Words in an issue title that make it a critical report.
CRITICAL_ISSUE_WORDS = ("bug", "error", "critical")

# Phrases in a comment that make it a suggestion.
SUGGESTION_PHRASES = ("suggestion", "idea:")


def _required(payload: PayloadDict, path: str, kind=str):
    """
    Get a value from the payload that must be there.

    Strings must also be non-empty.
    """
    try:
        value = glom(payload, path)
    except GlomError as exc:
        raise MalformedPayload(f"{path} is missing") from exc
    if not isinstance(value, kind) or (kind is str and not value):
        raise MalformedPayload(f"{path} is {value!r}")
    return value


def _contains_any(text: str, words) -> bool:
    text = text.lower()
    return any(word in text for word in words)


def classify_event(event_type: str, payload: PayloadDict) -> Optional[ContributionEvent]:
    """
    Decide what kind of contribution a webhook event describes.

    Arguments:
        event_type: the X-GitHub-Event header value.
        payload: the parsed event payload.

    Returns:
        A ContributionEvent, or None if the event doesn't earn a reward.

    Raises:
        MalformedPayload: if fields needed to classify the event are missing.
    """
    if not isinstance(payload, dict):
        raise MalformedPayload(f"payload is a {type(payload).__name__}, not an object")

    match event_type:
        case "push":
            # A push can hold many commits, but it counts as one contribution.
            return ContributionEvent(
                repository_url=_required(payload, "repository.html_url"),
                contributor=_required(payload, "pusher.name"),
                contribution_type=ContributionType.COMMIT,
                source_reference=_required(payload, "ref"),
                event_type=event_type,
            )

        case "pull_request":
            # Who and where are needed whatever the action is.
            pr = _required(payload, "pull_request", dict)
            repository_url = _required(pr, "base.repo.html_url")
            contributor = _required(pr, "user.login")
            pr_url = _required(pr, "html_url")
            if _required(payload, "action") != "closed":
                return None
            if not _required(pr, "merged", bool):
                return None
            return ContributionEvent(
                repository_url=repository_url,
                contributor=contributor,
                contribution_type=ContributionType.PULL_REQUEST_MERGED,
                source_reference=pr_url,
                event_type=event_type,
            )

        case "issues":
            issue = _required(payload, "issue", dict)
            repository_url = _required(payload, "repository.html_url")
            contributor = _required(issue, "user.login")
            issue_url = _required(issue, "html_url")
            if _required(payload, "action") != "opened":
                return None
            title = _required(issue, "title")
            if _contains_any(title, CRITICAL_ISSUE_WORDS):
                contribution_type = ContributionType.ISSUE_REPORT_CRITICAL
            else:
                contribution_type = ContributionType.ISSUE_REPORT_MINOR
            logger.debug(f"Issue {text_summary(title)!r} is {contribution_type}")
            return ContributionEvent(
                repository_url=repository_url,
                contributor=contributor,
                contribution_type=contribution_type,
                source_reference=issue_url,
                event_type=event_type,
            )

        case "issue_comment":
            body = _required(payload, "comment.body")
            if not _contains_any(body, SUGGESTION_PHRASES):
                return None
            return ContributionEvent(
                repository_url=_required(payload, "repository.html_url"),
                contributor=_required(payload, "comment.user.login"),
                contribution_type=ContributionType.SUGGESTION,
                source_reference=_required(payload, "comment.html_url"),
                event_type=event_type,
            )

        case _:
            return None


def describe_non_actionable(event_type: str, payload: PayloadDict) -> str:
    """
    Explain why an event that classified to None doesn't earn anything.
    """
    match event_type:
        case "pull_request":
            action = payload.get("action")
            if action == "closed":
                return "Pull request closed without merging, not configured for reward distribution."
            return f"Pull request action {action!r} not configured for reward distribution."
        case "issues":
            return f"Issue action {payload.get('action')!r} not configured for reward distribution."
        case "issue_comment":
            return "Comment not classified for reward distribution."
        case _:
            return f"Unhandled GitHub event type {event_type!r}, not configured for reward distribution."
