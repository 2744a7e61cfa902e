"""
cli.py

Responsibility: CLI entrypoints for gasdeploy.

Commands:
- `gas-create-repo <projectId> <englishName> <gitHubPAT> <gitHubUser>`
  make sure a private GitHub repo exists for the project
- `gas-deploy [--config PATH]`
  regenerate README.md (and docs/index.md) for the current directory,
  then commit and push

Both are also available as `python -m gasdeploy create-repo|deploy`.
All error handling lives here: module errors propagate up and are logged
and mapped to exit code 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from gasdeploy import __version__
from gasdeploy.config import ConfigError, load_config
from gasdeploy.documenter import DocumentWriteError, Documenter
from gasdeploy.git import GitCommandError
from gasdeploy.github_client import GitHubClient, GitHubError
from gasdeploy.llm_client import GenerationError
from gasdeploy.provisioner import provision

logger = logging.getLogger(__name__)

CREATE_REPO_USAGE = "Usage: gas-create-repo <projectId> <englishName> <gitHubPAT> <gitHubUser>"


class UsageError(RuntimeError):
    pass


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )


def create_repo_cmd(args: argparse.Namespace) -> int:
    values = (args.project_id, args.english_name, args.github_pat, args.github_user)
    if not all(values):
        raise UsageError(CREATE_REPO_USAGE)

    gh = GitHubClient(args.github_pat)
    provision(gh, project_id=args.project_id, name=args.english_name, owner=args.github_user)
    return 0


def deploy_cmd(args: argparse.Namespace) -> int:
    root = Path.cwd()
    config = load_config(root, args.config)
    Documenter(root, config).run()
    return 0


def _add_create_repo_args(p: argparse.ArgumentParser) -> None:
    # Optional at the argparse level so a missing value is a UsageError (exit 1).
    p.add_argument("project_id", nargs="?", metavar="projectId", help="GAS project ID")
    p.add_argument("english_name", nargs="?", metavar="englishName", help="Human-readable project name")
    p.add_argument("github_pat", nargs="?", metavar="gitHubPAT", help="GitHub personal access token")
    p.add_argument("github_user", nargs="?", metavar="gitHubUser", help="GitHub account that owns the repo")
    p.set_defaults(func=create_repo_cmd)


def _add_deploy_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", default=None, help="Path to a YAML config file (default: ./gas-deploy.yml if present)")
    p.set_defaults(func=deploy_cmd)


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gasdeploy", description="GAS project repo provisioning and documented deploys")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = p.add_subparsers(dest="command", required=True)

    c = sub.add_parser("create-repo", help="Create a private GitHub repo for a GAS project if missing")
    _add_create_repo_args(c)
    _add_common_args(c)

    d = sub.add_parser("deploy", help="Regenerate README/docs, commit and push")
    _add_deploy_args(d)
    _add_common_args(d)
    return p


def _dispatch(args: argparse.Namespace) -> int:
    _configure_logging(bool(args.verbose))
    try:
        return int(args.func(args))
    except UsageError as e:
        print(str(e), file=sys.stderr)
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
    except GitHubError as e:
        logger.error("Error talking to GitHub: %s", e)
    except GenerationError as e:
        logger.error("Error generating documentation: %s", e)
    except DocumentWriteError as e:
        logger.error("Error writing documentation: %s", e)
    except GitCommandError as e:
        logger.error("Error during git operations: %s", e)
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    return _dispatch(args)


def create_repo_main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="gas-create-repo", description="Create a private GitHub repo for a GAS project if missing")
    _add_create_repo_args(p)
    _add_common_args(p)
    return _dispatch(p.parse_args(argv))


def deploy_main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="gas-deploy", description="Regenerate README/docs for the current directory, commit and push")
    _add_deploy_args(p)
    _add_common_args(p)
    return _dispatch(p.parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())
