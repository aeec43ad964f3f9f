"""
These are the views that process webhook events coming from GitHub.
"""

import logging

from flask import current_app as app
from flask import Blueprint, request
from glom import glom

from deco_value_oracle.config import OracleSettings
from deco_value_oracle.exceptions import MalformedPayload, MissingEventType, OracleError
from deco_value_oracle.oracle import RewardOracle
from deco_value_oracle.utils import sentry_extra_context

github_bp = Blueprint('github_views', __name__)
logger = logging.getLogger(__name__)


@github_bp.route('/hook-receiver', methods=('POST',))
def hook_receiver():
    """
    Process incoming GitHub webhook events.

    1.  Get the event type from the X-GitHub-Event header, and the payload.
    2.  Classify the event, and if it's a contribution, find the reward for it
        in the repository's values.csv.
    3.  Hand the reward to the ledger.

    Returns:
        Tuple[str, int]: Message payload and HTTP status code
    """
    delivery = request.headers.get("X-GitHub-Delivery")
    try:
        event_type, event = _read_event()
    except OracleError as exc:
        logger.warning(f"Rejecting delivery {delivery}: {exc.detail}")
        return exc.message, exc.status_code

    repo = glom(event, "repository.html_url", default=None)
    who = glom(event, "sender.login", default="someone")
    logger.info(f"Incoming GitHub event: {event_type=!r}, {delivery=!r}, {repo=!r}, action={event.get('action')!r}, {who=!r}")
    sentry_extra_context({"event_type": event_type, "delivery": delivery, "repository": repo})

    oracle = RewardOracle(OracleSettings.from_config(app.config))
    try:
        result = oracle.process(event_type, event)
    except OracleError as exc:
        if exc.status_code >= 500:
            logger.error(f"{event_type} delivery {delivery} failed: {exc.detail}")
        else:
            logger.warning(f"{event_type} delivery {delivery} rejected: {exc.detail}")
        return exc.message, exc.status_code

    logger.info(f"{event_type} delivery {delivery}: {result.outcome.value}")
    return result.message, result.status_code


def _read_event():
    """
    Get the event type and the JSON payload from the request.

    Returns:
        (event_type, payload)
    """
    event_type = request.headers.get("X-GitHub-Event", "").strip()
    if not event_type:
        raise MissingEventType()

    event = request.get_json(force=True, silent=True)
    if not isinstance(event, dict):
        raise MalformedPayload(f"Body isn't a JSON object: {request.data[:100]!r}", message="Invalid JSON payload.")
    return event_type, event
