"""
documenter.py

Responsibility: the deploy pipeline for a GAS project root.

High-level flow:
1) Gather: project files, `git diff HEAD`, whether HEAD exists
2) Decide: NOOP / BRIEF / FULL
3) Generate README (and docs index on FULL) via the text-generation client
4) Clean generated text, write README.md (and docs/index.md)
5) git add / commit / push

Everything is generated before anything is written, so a generation failure
leaves the working tree untouched.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from gasdeploy import prompts
from gasdeploy.config import DeployConfig
from gasdeploy.git import GitRepo
from gasdeploy.llm_client import ChatCompletionClient
from gasdeploy.project_files import collect_project_files

logger = logging.getLogger(__name__)

FENCE_MARKER = "```markdown"
PLACEHOLDER_MARKER = "{apps script ID"


class DocumentWriteError(RuntimeError):
    pass


class TextGenerator(Protocol):
    def complete(self, prompt: str) -> str: ...


class DeployPlan(enum.Enum):
    NOOP = "noop"
    BRIEF = "brief"
    FULL = "full"


@dataclass(frozen=True)
class DeployResult:
    plan: DeployPlan
    written: tuple[Path, ...] = ()
    published: bool = False


def decide_plan(has_commits: bool, diff: str, *, skip_unchanged: bool = True) -> DeployPlan:
    """
    An empty repo or a non-empty diff always gets full documentation.
    Otherwise nothing changed: skip, or write a brief README when skipping is off.
    """
    if not has_commits or diff.strip():
        return DeployPlan.FULL
    if skip_unchanged:
        return DeployPlan.NOOP
    return DeployPlan.BRIEF


def clean_document(text: str) -> str:
    """
    Drop code-fence opener lines and lines carrying the script ID placeholder.
    """
    kept = [
        line
        for line in text.split("\n")
        if not line.strip().startswith(FENCE_MARKER) and PLACEHOLDER_MARKER not in line
    ]
    return "\n".join(kept)


class Documenter:
    def __init__(
        self,
        root: str | Path,
        config: DeployConfig,
        *,
        repo: GitRepo | None = None,
        generator: TextGenerator | None = None,
    ) -> None:
        self.root = Path(root).resolve()
        self.config = config
        self.repo = repo if repo is not None else GitRepo(self.root)
        self._generator = generator

    @property
    def project_name(self) -> str:
        return self.root.name

    def _client(self) -> TextGenerator:
        if self._generator is None:
            self._generator = ChatCompletionClient(
                self.config.require_api_key(),
                api_base=self.config.api_base,
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
            )
        return self._generator

    def _generate(self, prompt: str) -> str:
        return clean_document(self._client().complete(prompt))

    def run(self) -> DeployResult:
        logger.info("Reading project files...")
        files = collect_project_files(self.root, self.config.extensions)

        logger.info("Retrieving git diff for change summary...")
        diff = self.repo.diff()
        has_commits = self.repo.has_commits()

        plan = decide_plan(has_commits, diff, skip_unchanged=self.config.skip_unchanged)
        if plan is DeployPlan.NOOP:
            logger.info("No changes detected. Skipping README update and git push.")
            return DeployResult(plan=plan)

        docs_index: str | None = None
        if plan is DeployPlan.FULL:
            if not has_commits:
                logger.info("Repository has no commits yet; generating full documentation.")
            logger.info("Generating README.md...")
            readme = self._generate(prompts.full_readme_prompt(self.project_name, files, diff))
            logger.info("Generating documentation index...")
            docs_index = self._generate(prompts.docs_index_prompt(self.project_name, files, diff))
        else:
            logger.info("Generating brief README.md...")
            readme = self._generate(prompts.brief_readme_prompt(self.project_name, files))

        written = [self._write(self.root / "README.md", readme)]
        if docs_index is not None:
            written.append(self._write(self.root / self.config.docs_dir / "index.md", docs_index))

        published = self._publish()
        return DeployResult(plan=plan, written=tuple(written), published=published)

    def _write(self, path: Path, content: str) -> Path:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise DocumentWriteError(f"Cannot write {path}: {e}") from e
        logger.info("Updated %s written.", path.relative_to(self.root))
        return path

    def _publish(self) -> bool:
        self.repo.add_all()
        self.repo.commit(self.config.commit_message)
        if self.config.push:
            self.repo.push()
            logger.info("Changes pushed to GitHub successfully.")
            return True
        logger.info("Committed locally; push disabled in configuration.")
        return False
