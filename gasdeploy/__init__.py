"""
gasdeploy package

Two small automation commands for a Google Apps Script project kept in git.

Key responsibilities are split across modules:
- `github_client.py`: isolated GitHub REST API interactions (repo lookup / creation)
- `provisioner.py`: repository name slug + "create if missing" flow
- `project_files.py`: collect the project's source-like files
- `git.py`: local git subprocess calls (diff, HEAD check, add / commit / push)
- `llm_client.py`: chat-completions text generation
- `prompts.py`: Jinja2 prompt templates for the README and docs index
- `documenter.py`: deploy pipeline (gather -> decide -> generate -> write -> publish)
- `config.py`: YAML + environment configuration
- `cli.py`: CLI entrypoints
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
