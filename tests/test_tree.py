"""Tests for readmegen.tree."""

from __future__ import annotations

from pathlib import Path

from readmegen.tree import render_tree
from tests._fixtures.project_builder import ProjectBuilder


def test_render_tree_returns_none_for_missing_directory(tmp_path: Path) -> None:
    assert render_tree(tmp_path / "missing", 2) is None


def test_render_tree_returns_none_for_file(tmp_path: Path) -> None:
    target = tmp_path / "src"
    target.write_text("not a directory", encoding="utf-8")
    assert render_tree(target, 2) is None


def test_render_tree_formats_nested_entries(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            "src/index.js": "",
            "src/components/Button.jsx": "",
        }
    )

    tree = render_tree("src", 2, base=project_builder.path())

    assert tree == "\n".join(
        [
            "src/",
            "  ├── components",
            "    ├── Button.jsx",
            "  ├── index.js",
        ]
    )


def test_render_tree_respects_depth_bound(project_builder: ProjectBuilder) -> None:
    project_builder.write({"src/one/two/three/four.txt": ""})

    tree = render_tree("src", 2, base=project_builder.path())

    assert tree is not None
    assert "├── one" in tree
    assert "├── two" in tree
    assert "three" not in tree
    assert "four.txt" not in tree


def test_render_tree_sorts_entries_by_default(project_builder: ProjectBuilder) -> None:
    project_builder.write({"src/b.js": "", "src/a.js": "", "src/c.js": ""})

    tree = render_tree("src", 1, base=project_builder.path())

    assert tree is not None
    assert tree.splitlines()[1:] == ["  ├── a.js", "  ├── b.js", "  ├── c.js"]


def test_render_tree_unsorted_lists_every_entry(project_builder: ProjectBuilder) -> None:
    project_builder.write({"src/b.js": "", "src/a.js": ""})

    tree = render_tree("src", 1, base=project_builder.path(), sort_entries=False)

    assert tree is not None
    assert sorted(tree.splitlines()[1:]) == ["  ├── a.js", "  ├── b.js"]


def test_render_tree_skips_excluded_names(project_builder: ProjectBuilder) -> None:
    project_builder.write({"src/node_modules/pkg/index.js": "", "src/app.js": ""})

    tree = render_tree("src", 2, base=project_builder.path(), exclude={"node_modules"})

    assert tree == "src/\n  ├── app.js"


def test_render_tree_of_empty_directory_is_header_only(project_builder: ProjectBuilder) -> None:
    project_builder.mkdir("src")

    assert render_tree("src", 2, base=project_builder.path()) == "src/"


def test_render_tree_uses_working_directory_without_base(
    project_builder: ProjectBuilder, monkeypatch
) -> None:
    project_builder.write({"src/main.js": ""})
    monkeypatch.chdir(project_builder.path())

    assert render_tree("src", 2) == "src/\n  ├── main.js"
