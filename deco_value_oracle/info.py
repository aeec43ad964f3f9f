"""
Get information about repositories and contributors from GitHub.
"""

import logging
from typing import Optional

import requests
from urlobject import URLObject

from deco_value_oracle.auth import get_github_session
from deco_value_oracle.config import OracleSettings
from deco_value_oracle.exceptions import RuleSourceUnavailable
from deco_value_oracle.rules import FALLBACK_ROLE
from deco_value_oracle.utils import RequestFailed, log_check_response

logger = logging.getLogger(__name__)

MAINTAINER_ROLE = "maintainer"


def repo_full_name(repository_url: str) -> Optional[str]:
    """
    Get the "owner/repo" name from a GitHub repository URL.

    Returns None if the URL isn't a github.com repository URL.
    """
    url = URLObject(repository_url)
    if url.hostname not in ("github.com", "www.github.com"):
        return None
    parts = [p for p in url.path.split("/") if p]
    if len(parts) != 2:
        return None
    owner, repo = parts
    if repo.endswith(".git"):
        repo = repo[:-4]
    return f"{owner}/{repo}"


def _github_file_url(repo_fullname: str, file_path: str) -> str:
    """Get the GitHub url to retrieve the text of a file."""
    # HEAD is used here to get the tip of the repo, regardless of whether it
    # uses master or main.
    return f"https://raw.githubusercontent.com/{repo_fullname}/HEAD/{file_path}"


def read_github_file(settings: OracleSettings, repo_fullname: str, file_path: str) -> str:
    """
    Read a GitHub file from the default branch of a repo.

    Arguments:
        `repo_fullname`: the owner and repo to access: ``"deco/project"``.
        `file_path`: the path to the file within the repo.

    Returns:
        The text of the file.
    """
    url = _github_file_url(repo_fullname, file_path)
    logger.debug(f"Grabbing data file from: {url}")
    resp = get_github_session(settings).get(url)
    log_check_response(resp)
    return resp.text


def fetch_rule_source(settings: OracleSettings, repository_url: str) -> str:
    """
    Get the raw text of the rules file for a repository.

    Raises:
        RuleSourceUnavailable: if the repository isn't on GitHub, or the file
            can't be read.
    """
    full_name = repo_full_name(repository_url)
    if full_name is None:
        raise RuleSourceUnavailable(f"Not a GitHub repository URL: {repository_url!r}")
    try:
        return read_github_file(settings, full_name, settings.rules_file)
    except (RequestFailed, requests.RequestException) as exc:
        raise RuleSourceUnavailable(
            f"Couldn't read {settings.rules_file} from {full_name}: {exc}"
        ) from exc


def get_contributor_role(settings: OracleSettings, login: str, repository_url: str) -> str:
    """
    Decide which role a contributor has in a repository.

    Collaborators with one of the maintainer permissions (by default, admin
    or maintain) are maintainers.  Everyone else, including people who aren't
    collaborators at all, is a contributor.
    """
    full_name = repo_full_name(repository_url)
    if full_name is None:
        return FALLBACK_ROLE

    url = f"/repos/{full_name}/collaborators/{login}/permission"
    try:
        resp = get_github_session(settings).get(url)
        if resp.status_code == 404:
            return FALLBACK_ROLE
        log_check_response(resp)
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError(f"permission response is {data!r}")
    except (RequestFailed, requests.RequestException, ValueError) as exc:
        logger.warning(f"Couldn't get permission of @{login} in {full_name}, using {FALLBACK_ROLE!r}: {exc}")
        return FALLBACK_ROLE

    # role_name is finer-grained ("maintain", "triage"); permission is the
    # legacy admin/write/read/none.
    permission = data.get("role_name") or data.get("permission")
    if permission in settings.maintainer_permissions:
        return MAINTAINER_ROLE
    return FALLBACK_ROLE
