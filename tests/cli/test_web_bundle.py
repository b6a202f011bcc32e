# topmark:header:start
#
#   project      : DailyTip
#   file         : test_web_bundle.py
#   file_relpath : tests/cli/test_web_bundle.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the ``dailytip-web`` bundler."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from dailytip.cli.exit_codes import ExitCode
from dailytip.cli.web import bundle_collections, js_assignment, js_identifier, web
from tests.cli.conftest import assert_SUCCESS, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path


def parse_assignment(text: str, target: str) -> Any:
    """Return the JSON value assigned to ``target`` in a one-statement script."""
    prefix = f"{target} = "
    assert text.startswith(prefix)
    assert text.endswith(";")
    return json.loads(text[len(prefix) : -1])


def test_js_identifier_replaces_dashes() -> None:
    """Dashes are not valid in identifiers and become underscores."""
    assert js_identifier("productivity-hacks") == "tipData_productivity_hacks"
    assert js_identifier("alpha") == "tipData_alpha"


def test_js_assignment_uses_two_space_indent() -> None:
    """The assigned JSON should be indented with two spaces."""
    assert js_assignment("window.x", {"a": 1}) == 'window.x = {\n  "a": 1\n};'


def test_bundle_writes_all_collections(tmp_path: Path, collections_dir: Path) -> None:
    """``tip-data.js`` should map every collection name to its data."""
    out = tmp_path / "dist" / "public"
    result = run_cli_in(
        tmp_path,
        ["--collections-dir", str(collections_dir), "--output-dir", str(out)],
        command=web,
    )

    assert_SUCCESS(result)
    bundle = parse_assignment(
        (out / "tip-data.js").read_text(encoding="utf-8"), "window.tipCollections"
    )
    assert list(bundle) == ["alpha", "beta-gamma"]
    assert bundle["beta-gamma"] == {
        "title": "Beta Gamma",
        "tips": [{"title": "Third", "tip": "Three"}],
    }
    assert "tip-data.js" in result.stdout


def test_bundle_renders_one_tip_per_collection(tmp_path: Path, collections_dir: Path) -> None:
    """Each collection should get a pre-rendered HTML tip in ``<name>.js``."""
    out = tmp_path / "out"
    result = run_cli_in(
        tmp_path,
        ["--collections-dir", str(collections_dir), "--output-dir", str(out)],
        command=web,
    )

    assert_SUCCESS(result)
    rendered = parse_assignment(
        (out / "beta-gamma.js").read_text(encoding="utf-8"), "window.tipData_beta_gamma"
    )
    html = rendered["html"]
    assert html.startswith('<p class="category-title">Beta Gamma</p>')
    assert html.index("<h3>Third</h3>") < html.index("<p>Three</p>")
    alpha = parse_assignment((out / "alpha.js").read_text(encoding="utf-8"), "window.tipData_alpha")
    assert "<h3>First</h3>" in alpha["html"] or "<h3>Second</h3>" in alpha["html"]


def test_no_render_writes_only_the_bundle(tmp_path: Path, collections_dir: Path) -> None:
    """``--no-render`` should skip the per-collection scripts."""
    out = tmp_path / "out"
    result = run_cli_in(
        tmp_path,
        ["--collections-dir", str(collections_dir), "--output-dir", str(out), "--no-render"],
        command=web,
    )

    assert_SUCCESS(result)
    assert sorted(p.name for p in out.iterdir()) == ["tip-data.js"]


def test_default_output_dir_is_relative_to_cwd(tmp_path: Path, collections_dir: Path) -> None:
    """Without ``--output-dir`` files land in ``dist/public``."""
    result = run_cli_in(tmp_path, ["--collections-dir", str(collections_dir)], command=web)

    assert_SUCCESS(result)
    assert (tmp_path / "dist" / "public" / "tip-data.js").is_file()


def test_bundled_collections_are_used_by_default(tmp_path: Path) -> None:
    """Without a directory option the bundled collections are bundled."""
    out = tmp_path / "out"
    result = run_cli_in(tmp_path, ["--output-dir", str(out)], command=web)

    assert_SUCCESS(result)
    assert (out / "leadership-tone.js").is_file()
    assert (out / "productivity-hacks.js").is_file()


def test_no_collections_is_not_an_error(tmp_path: Path) -> None:
    """An empty directory should print a message, write nothing, and exit 0."""
    empty = tmp_path / "empty"
    empty.mkdir()
    out = tmp_path / "out"

    result = run_cli_in(
        tmp_path, ["--collections-dir", str(empty), "--output-dir", str(out)], command=web
    )

    assert_SUCCESS(result)
    assert "No collection files found" in result.stderr
    assert result.stdout == ""
    assert not out.exists()


def test_broken_collection_exits_with_data_error(tmp_path: Path) -> None:
    """A malformed collection should abort the bundle with exit code 65."""
    directory = tmp_path / "tips"
    directory.mkdir()
    (directory / "bad.json").write_text("[]", encoding="utf-8")
    out = tmp_path / "out"

    result = run_cli_in(
        tmp_path, ["--collections-dir", str(directory), "--output-dir", str(out)], command=web
    )

    assert result.exit_code == ExitCode.DATA_ERROR
    assert "bad.json" in result.stderr
    assert not out.exists()


def test_bundle_collections_returns_written_files(tmp_path: Path, collections_dir: Path) -> None:
    """The library entry point should report the files it wrote, bundle first."""
    written = bundle_collections(collections_dir, tmp_path / "out")

    assert [p.name for p in written] == ["tip-data.js", "alpha.js", "beta-gamma.js"]
