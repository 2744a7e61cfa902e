from pathlib import Path

import pytest

from gasdeploy.project_files import collect_project_files


def test_collects_allowed_extensions_only(tmp_path: Path) -> None:
    (tmp_path / "Code.gs").write_text("gs", encoding="utf-8")
    (tmp_path / "main.js").write_text("js", encoding="utf-8")
    (tmp_path / "index.html").write_text("html", encoding="utf-8")
    (tmp_path / "appsscript.json").write_text("{}", encoding="utf-8")
    (tmp_path / "README.md").write_text("readme", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("txt", encoding="utf-8")

    files = collect_project_files(tmp_path)
    assert list(files) == ["Code.gs", "appsscript.json", "index.html", "main.js"]
    assert files["Code.gs"] == "gs"


def test_does_not_recurse(tmp_path: Path) -> None:
    (tmp_path / "lib").mkdir()
    (tmp_path / "lib" / "util.gs").write_text("nested", encoding="utf-8")
    (tmp_path / "dir.js").mkdir()
    assert dict(collect_project_files(tmp_path)) == {}


def test_custom_extensions(tmp_path: Path) -> None:
    (tmp_path / "a.ts").write_text("ts", encoding="utf-8")
    (tmp_path / "b.gs").write_text("gs", encoding="utf-8")
    assert list(collect_project_files(tmp_path, [".ts"])) == ["a.ts"]


def test_result_is_read_only(tmp_path: Path) -> None:
    (tmp_path / "a.gs").write_text("gs", encoding="utf-8")
    files = collect_project_files(tmp_path)
    with pytest.raises(TypeError):
        files["b.gs"] = "x"  # type: ignore[index]


def test_invalid_utf8_is_replaced_not_fatal(tmp_path: Path) -> None:
    (tmp_path / "data.json").write_bytes(b'{"k": "\xff\xfe"}')
    (tmp_path / "page.html").write_bytes("caf\xe9".encode("latin-1"))

    files = collect_project_files(tmp_path)
    assert files["data.json"] == '{"k": "\ufffd\ufffd"}'
    assert files["page.html"] == "caf\ufffd"
