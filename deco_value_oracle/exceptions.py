"""
Errors that end a webhook delivery with a failure status.

Each carries the HTTP status and the message to send back to GitHub.
Non-actionable events and missing rules are not errors: they are
reported as successful outcomes (see ``deco_value_oracle.types.Outcome``).
"""


class OracleError(Exception):
    status_code = 500
    message = "Internal error."

    def __init__(self, detail=None, message=None):
        if message is not None:
            self.message = message
        self.detail = detail or self.message
        super().__init__(self.detail)


class MissingEventType(OracleError):
    status_code = 400
    message = "Missing X-GitHub-Event header."


class MalformedPayload(OracleError):
    status_code = 400
    message = "Could not extract essential data from webhook payload."


class RuleSourceUnavailable(OracleError):
    status_code = 500
    message = "Error fetching or parsing values.csv."


class NoRulesDefined(OracleError):
    status_code = 500
    message = "values.csv loaded, but no valid rules found. Check CSV format."


class LedgerDispatchFailed(OracleError):
    status_code = 500
    message = "Failed to dispatch reward to the ledger."
