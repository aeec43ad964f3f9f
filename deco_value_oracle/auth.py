"""
Create authenticated sessions for access to GitHub and the ledger.
"""

import requests
from urlobject import URLObject

from deco_value_oracle.config import OracleSettings


class BaseUrlSession(requests.Session):
    """
    A requests Session class that applies a base URL to the requested URL.
    """
    def __init__(self, base_url):
        super().__init__()
        self.base_url = URLObject(base_url)

    def request(self, method, url, data=None, headers=None, **kwargs):
        return super().request(
            method=method,
            url=self.base_url.relative(url),
            data=data,
            headers=headers,
            **kwargs
        )


def get_github_session(settings: OracleSettings):
    """
    Get the GitHub session to use.
    """
    session = BaseUrlSession(base_url="https://api.github.com")
    if settings.github_token:
        session.headers["Authorization"] = f"token {settings.github_token}"
    session.trust_env = False   # prevent reading the local .netrc
    return session


def get_ledger_session(settings: OracleSettings):
    """
    Get a session for the minting endpoint of the ledger.

    The ledger signs and submits the transaction itself; we only
    authenticate to it.
    """
    # A trailing slash so that relative paths land under the configured prefix.
    base_url = settings.ledger_url.rstrip("/") + "/"
    session = BaseUrlSession(base_url=base_url)
    if settings.ledger_api_token:
        session.headers["Authorization"] = f"Bearer {settings.ledger_api_token}"
    session.trust_env = False
    return session
