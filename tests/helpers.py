"""Helpers for tests: webhook payloads shaped like GitHub's."""

REPO = "deco/project"
REPO_URL = f"https://github.com/{REPO}"

VALUES_CSV = """\
# contribution_type,role,base_value,member_multiplier,non_member_multiplier
commit,contributor,10,1.0,0.5
commit,maintainer,15,1.0,0.5
pull_request_merged,contributor,50,1.5,1.0
issue_report_critical,contributor,20,1.0,1.0
issue_report_minor,contributor,5,1.0,1.0
"""


def _repository(repo=REPO):
    return {
        "full_name": repo,
        "html_url": f"https://github.com/{repo}",
    }


def _user(login):
    return {"login": login, "html_url": f"https://github.com/{login}"}


def push_event(pusher="alice", ref="refs/heads/main", repo=REPO):
    return {
        "ref": ref,
        "repository": _repository(repo),
        "pusher": {"name": pusher, "email": f"{pusher}@example.com"},
        "sender": _user(pusher),
        "commits": [{"id": "4d3c2b1a", "message": "Fix the parser"}],
    }


def pull_request_event(action="closed", merged=True, user="bob", number=17, repo=REPO):
    return {
        "action": action,
        "number": number,
        "pull_request": {
            "number": number,
            "html_url": f"https://github.com/{repo}/pull/{number}",
            "merged": merged,
            "user": _user(user),
            "base": {"ref": "main", "repo": _repository(repo)},
        },
        "repository": _repository(repo),
        "sender": _user(user),
    }


def issues_event(action="opened", title="Critical bug in parser", user="carol", number=5, repo=REPO):
    return {
        "action": action,
        "issue": {
            "number": number,
            "title": title,
            "html_url": f"https://github.com/{repo}/issues/{number}",
            "user": _user(user),
        },
        "repository": _repository(repo),
        "sender": _user(user),
    }


def issue_comment_event(body="idea: add dark mode", user="dave", number=5, repo=REPO):
    return {
        "action": "created",
        "issue": {
            "number": number,
            "html_url": f"https://github.com/{repo}/issues/{number}",
            "user": _user("carol"),
        },
        "comment": {
            "id": 1001,
            "body": body,
            "html_url": f"https://github.com/{repo}/issues/{number}#issuecomment-1001",
            "user": _user(user),
        },
        "repository": _repository(repo),
        "sender": _user(user),
    }
