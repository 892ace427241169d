"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from gqlcontext.cli.main import build_parser, main


def test_build_parser_accepts_trace_flags(tmp_path: Path) -> None:
    args = build_parser().parse_args(
        [
            "trace",
            "-r",
            str(tmp_path),
            "-s",
            "a.graphql",
            "-s",
            "b.graphql",
            "-d",
            "q.graphql",
            "-o",
            str(tmp_path / "out"),
            "--format",
            "json",
            "--fail-on-unresolved",
        ]
    )

    assert args.command == "trace"
    assert args.root == tmp_path
    assert args.schema == [Path("a.graphql"), Path("b.graphql")]
    assert args.document == [Path("q.graphql")]
    assert args.output_dir == tmp_path / "out"
    assert args.format == "json"
    assert args.fail_on_unresolved is True


def test_build_parser_rejects_unknown_format(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["trace", "-r", str(tmp_path), "--format", "sarif"])


def test_trace_text_output(workspace_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["trace", "-r", str(workspace_root), "--no-color"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "queries/user.graphql" in out
    assert "field friends" in out
    assert "Unresolved  2" in out


def test_trace_json_output(workspace_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(
        [
            "trace",
            "-r",
            str(workspace_root),
            "-d",
            str(workspace_root / "queries" / "user.graphql"),
            "--format",
            "json",
        ]
    )

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["document_count"] == 1
    assert payload["unresolved_count"] == 0


def test_trace_writes_report(workspace_root: Path, tmp_path: Path) -> None:
    out_dir = tmp_path / "out"

    exit_code = main(["trace", "-r", str(workspace_root), "-o", str(out_dir), "--no-stdout"])

    assert exit_code == 0
    assert json.loads((out_dir / "trace.json").read_text(encoding="utf-8"))["document_count"] == 2


def test_fail_on_unresolved_flag(workspace_root: Path) -> None:
    assert main(["trace", "-r", str(workspace_root), "--no-stdout", "--fail-on-unresolved"]) == 1


def test_fail_on_unresolved_from_config(workspace_root: Path, tmp_path: Path) -> None:
    config_path = tmp_path / "gqlcontext.yaml"
    config_path.write_text("fail_on_unresolved: true\n", encoding="utf-8")

    assert main(["trace", "-r", str(workspace_root), "-c", str(config_path), "--no-stdout"]) == 1


def test_config_error_exit_code(workspace_root: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "gqlcontext.yaml"
    config_path.write_text("max_file_kb: -1\n", encoding="utf-8")

    exit_code = main(["trace", "-r", str(workspace_root), "-c", str(config_path)])

    assert exit_code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_missing_root_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["trace", "-r", str(tmp_path / "missing")]) == 2
    assert "root directory does not exist" in capsys.readouterr().err


def test_schema_error_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "schema.graphql").write_text("type Query {", encoding="utf-8")

    exit_code = main(["trace", "-r", str(tmp_path)])

    assert exit_code == 1
    assert "Trace error" in capsys.readouterr().err


def test_explicit_schema_paths(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    schema_path = tmp_path / "api.graphql"
    schema_path.write_text("type Query { hello: String }\n", encoding="utf-8")
    doc_path = tmp_path / "q.graphql"
    doc_path.write_text("{ hello goodbye }\n", encoding="utf-8")

    exit_code = main(["trace", "-r", str(tmp_path), "-s", str(schema_path), "--format", "json"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["schema"] == ["api.graphql"]
    assert [d["path"] for d in payload["documents"]] == ["q.graphql"]
    assert payload["unresolved_count"] == 1


def test_relative_paths_resolve_against_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    workspace = tmp_path / "ws"
    workspace.mkdir()
    (workspace / "api.graphql").write_text("type Query { hello: String }\n", encoding="utf-8")
    (workspace / "q.graphql").write_text("{ hello }\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    exit_code = main(["trace", "-r", "ws", "-s", "api.graphql", "--format", "json"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["schema"] == ["api.graphql"]
    # The schema file is excluded from discovery even when given relatively.
    assert [d["path"] for d in payload["documents"]] == ["q.graphql"]


def test_relative_document_paths_resolve_against_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    workspace = tmp_path / "ws"
    workspace.mkdir()
    (workspace / "schema.graphql").write_text("type Query { hello: String }\n", encoding="utf-8")
    (workspace / "q.graphql").write_text("{ hello }\n", encoding="utf-8")
    (workspace / "other.graphql").write_text("{ goodbye }\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    exit_code = main(["trace", "-r", "ws", "-d", "q.graphql", "--format", "json"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert [d["path"] for d in payload["documents"]] == ["q.graphql"]
    assert payload["unresolved_count"] == 0


def test_report_write_failure_exit_code(
    workspace_root: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")

    exit_code = main(["trace", "-r", str(workspace_root), "-o", str(blocker), "--no-stdout"])

    assert exit_code == 1
    assert "Failed to write trace report" in capsys.readouterr().err
