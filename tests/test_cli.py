import json
import logging

from lunr_index.cli import main
from lunr_index.core.config import Config

from .conftest import write_filters


def test_build_command(guide_site, capsys):
    dist, _ = guide_site

    assert main(["build", str(dist), "--no-progress"]) == 0

    data = json.loads((dist / "search_index.json").read_text(encoding="utf-8"))
    assert [item["loc"] for item in data] == ["/#home", "/guide#setup", "/guide"]
    out = capsys.readouterr().out
    assert "전체 항목: 3" in out
    assert "본문 포함 항목: 2" in out


def test_build_command_with_manifest_and_filters(guide_site, tmp_path):
    dist, _ = guide_site
    manifest = tmp_path / "routes.json"
    manifest.write_text(
        json.dumps([{"route": "/guide", "type": "page", "distPath": "/guide/index.html"}]),
        encoding="utf-8",
    )
    filters = write_filters(
        tmp_path,
        "def result_filter(entry, idx, entries):\n"
        "    return 'content' in entry.to_dict()\n",
    )

    code = main(
        [
            "build",
            str(dist),
            "--routes",
            str(manifest),
            "--filters",
            str(filters),
            "--output-name",
            "lunr.json",
            "--no-progress",
        ]
    )

    assert code == 0
    data = json.loads((dist / "lunr.json").read_text(encoding="utf-8"))
    assert data == [{"loc": "/guide#setup", "title": "Setup", "content": "Install it."}]


def test_build_command_missing_directory(tmp_path):
    assert main(["build", str(tmp_path / "missing")]) == 1


def test_build_command_reports_page_errors(guide_site, tmp_path, caplog):
    dist, _ = guide_site
    manifest = tmp_path / "routes.json"
    manifest.write_text(
        json.dumps([{"route": "/gone", "distPath": "/gone.html"}]), encoding="utf-8"
    )

    assert main(["build", str(dist), "--routes", str(manifest), "--no-progress"]) == 1
    assert not (dist / "search_index.json").exists()
    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1


def test_routes_command(guide_site, capsys):
    dist, _ = guide_site

    assert main(["routes", str(dist)]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    assert [line.split("\t")[0] for line in lines] == ["/guide", "/"]


def test_show_command(guide_site, capsys):
    dist, _ = guide_site
    main(["build", str(dist), "--no-progress"])
    capsys.readouterr()

    assert main(["show", str(dist / "search_index.json"), "--limit", "1"]) == 0

    out = capsys.readouterr().out
    assert "색인 항목 (3개)" in out
    assert "위치: /#home" in out
    assert "/guide#setup" not in out


def test_show_command_missing_file(tmp_path):
    assert main(["show", str(tmp_path / "missing.json")]) == 1


def test_no_command():
    assert main([]) == 1


def test_build_command_rejects_output_path(guide_site, tmp_path):
    dist, _ = guide_site

    assert main(["build", str(dist), "--output-name", "../x.json", "--no-progress"]) == 1
    assert not (tmp_path / "x.json").exists()
    assert not (dist / "search_index.json").exists()


def test_config_command(capsys):
    assert main(["config"]) == 0

    out = capsys.readouterr().out
    assert "색인 파일 이름: search_index.json" in out
    assert "설정이 올바릅니다" in out


def test_config_command_reports_errors(monkeypatch, capsys):
    monkeypatch.setattr(Config, "SECTION_ATTRIBUTE", "")

    assert main(["config"]) == 1
    assert "SECTION_ATTRIBUTE" in capsys.readouterr().out
