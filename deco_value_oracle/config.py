import dataclasses
import os
from typing import Any, FrozenSet, Mapping, Optional


def _split_list(value):
    return tuple(item.strip() for item in value.split(",") if item.strip())


class DefaultConfig:
    SECRET_KEY = os.environ.get("FLASK_SECRET_KEY", "secrettoeveryone")
    GITHUB_TOKEN = os.environ.get("GITHUB_TOKEN")
    LEDGER_URL = os.environ.get("LEDGER_URL")
    LEDGER_API_TOKEN = os.environ.get("LEDGER_API_TOKEN")
    # Each oracle deployment mints on exactly one DeCo contract.
    NEAR_DECO_CONTRACT_ID = os.environ.get("NEAR_DECO_CONTRACT_ID")
    RULES_FILE = os.environ.get("RULES_FILE", "values.csv")
    MAINTAINER_PERMISSIONS = _split_list(
        os.environ.get("MAINTAINER_PERMISSIONS", "admin,maintain")
    )


class DevelopmentConfig(DefaultConfig):
    DEBUG = True


class TestingConfig(DefaultConfig):
    TESTING = True


@dataclasses.dataclass(frozen=True)
class OracleSettings:
    """
    Everything the reward pipeline needs to know about its deployment.

    Built once per request from the Flask config and handed to each
    component, so nothing below the view reads the environment.
    """
    github_token: Optional[str] = None
    ledger_url: Optional[str] = None
    ledger_api_token: Optional[str] = None
    contract_id: Optional[str] = None
    rules_file: str = "values.csv"
    maintainer_permissions: FrozenSet[str] = frozenset({"admin", "maintain"})

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "OracleSettings":
        # Unset means the default; empty means nobody is a maintainer.
        permissions = config.get("MAINTAINER_PERMISSIONS")
        if permissions is None:
            permissions = ("admin", "maintain")
        if isinstance(permissions, str):
            permissions = _split_list(permissions)
        return cls(
            github_token=config.get("GITHUB_TOKEN"),
            ledger_url=config.get("LEDGER_URL"),
            ledger_api_token=config.get("LEDGER_API_TOKEN"),
            contract_id=config.get("NEAR_DECO_CONTRACT_ID"),
            rules_file=config.get("RULES_FILE") or "values.csv",
            maintainer_permissions=frozenset(permissions),
        )
