import textwrap
from pathlib import Path

import pytest

from gasdeploy.config import CONFIG_FILENAME, DEFAULT_COMMIT_MESSAGE, ConfigError, load_config


def test_defaults_without_file(tmp_path: Path) -> None:
    cfg = load_config(tmp_path, environ={})
    assert cfg.model == "gpt-3.5-turbo"
    assert cfg.max_tokens == 1500
    assert cfg.temperature == 0.3
    assert cfg.commit_message == DEFAULT_COMMIT_MESSAGE
    assert cfg.extensions == (".gs", ".js", ".html", ".json")
    assert cfg.skip_unchanged is True
    assert cfg.api_key == ""


def test_env_supplies_key_and_base(tmp_path: Path) -> None:
    cfg = load_config(tmp_path, environ={"OPENAI_API_KEY": "sk-1", "OPENAI_API_BASE": "http://proxy/v1"})
    assert cfg.require_api_key() == "sk-1"
    assert cfg.api_base == "http://proxy/v1"


def test_missing_key_only_fails_on_use(tmp_path: Path) -> None:
    cfg = load_config(tmp_path, environ={})
    with pytest.raises(ConfigError, match="OPENAI_API_KEY"):
        cfg.require_api_key()


def test_yaml_file_in_project_root(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text(
        textwrap.dedent("""\
            model: gpt-4o-mini
            max_tokens: 3000
            temperature: 0
            commit_message: "docs: refresh"
            extensions: [".gs", ".html"]
            skip_unchanged: false
            push: false
        """),
        encoding="utf-8",
    )
    cfg = load_config(tmp_path, environ={})
    assert cfg.model == "gpt-4o-mini"
    assert cfg.max_tokens == 3000
    assert cfg.temperature == 0.0
    assert cfg.commit_message == "docs: refresh"
    assert cfg.extensions == (".gs", ".html")
    assert cfg.skip_unchanged is False
    assert cfg.push is False


def test_explicit_path_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        load_config(tmp_path, tmp_path / "nope.yml", environ={})


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "max_tokens: lots\n",
        "max_tokens: true\n",
        "push: 'yes'\n",
        "extensions: [gs]\n",
        "commit_message: ''\n",
        "model: [unclosed\n",
    ],
)
def test_invalid_config(tmp_path: Path, content: str) -> None:
    path = tmp_path / "custom.yml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path, path, environ={})
