"""
provisioner.py

Responsibility: make sure a private GitHub repository exists for a GAS project.

The repository name is a slug of the project's display name; the lookup and
creation calls themselves live in `github_client.py`.
"""

from __future__ import annotations

import logging
import re

from gasdeploy.github_client import GitHubClient, ProvisionOutcome

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def slugify(name: str) -> str:
    """
    "My  Cool Project" -> "my-cool-project"
    """
    return _WHITESPACE.sub("-", name.strip().lower())


def describe(project_id: str, name: str) -> str:
    return f"Repository for GAS project (ID: {project_id}) - {name}"


def provision(client: GitHubClient, *, project_id: str, name: str, owner: str) -> ProvisionOutcome:
    """
    Look up `owner/<slug>` and create it (private) when it is missing.
    """
    repo_name = slugify(name)

    if client.repo_exists(owner, repo_name):
        logger.info('Repository "%s" already exists.', repo_name)
        return ProvisionOutcome.EXISTS

    outcome = client.create_repo(
        name=repo_name,
        private=True,
        description=describe(project_id, name),
    )
    if outcome is ProvisionOutcome.ALREADY_EXISTS:
        logger.info('Repository "%s" already exists.', repo_name)
    else:
        logger.info('Repository "%s" created successfully.', repo_name)
    return outcome
