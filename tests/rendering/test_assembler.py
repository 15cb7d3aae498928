"""Tests for README assembly."""

from __future__ import annotations

from pathlib import Path

from readmegen.config import ReadmeDefaults
from readmegen.models import CommandSet, ManifestData, TechTag
from readmegen.rendering import ReadmeAssembler, assemble_readme

_NPM = CommandSet("npm install", "npm run dev")


def test_minimal_document_has_only_mandatory_sections() -> None:
    readme = assemble_readme(
        ManifestData(),
        frozenset({TechTag.JAVASCRIPT}),
        _NPM,
        [],
        [],
        None,
    )

    assert readme == (
        "# 📘 Project Name\n"
        "\n"
        "A modern application with clean architecture.\n"
        "\n"
        "---\n"
        "\n"
        "## 🧱 Tech Stack\n"
        "\n"
        "| Technology | Description |\n"
        "|------------|-------------|\n"
        "| JavaScript | Programming language for web apps |\n"
        "\n"
        "---\n"
        "\n"
        "## 🚀 Getting Started\n"
        "\n"
        "Install dependencies:\n"
        "```bash\n"
        "npm install\n"
        "```\n"
        "\n"
        "Run the app:\n"
        "```bash\n"
        "npm run dev\n"
        "```\n"
        "\n"
        "---\n"
        "\n"
        "## 📄 License\n"
        "\n"
        "MIT\n"
    )
    assert "Features" not in readme


def test_full_document_orders_every_section() -> None:
    manifest = ManifestData(
        name="shop",
        description="Storefront",
        license="ISC",
        dependencies={"react": "18"},
        scripts={"dev": "vite", "build": "vite build"},
    )

    readme = assemble_readme(
        manifest,
        frozenset({TechTag.VITE, TechTag.REACT, TechTag.JAVASCRIPT}),
        _NPM,
        ["⚛️ Built with React for component-driven UI"],
        ["API_URL=http://localhost", "DEBUG=false"],
        "src/\n  ├── main.jsx",
    )

    headers = [line for line in readme.splitlines() if line.startswith("#")]
    assert headers == [
        "# 📘 shop",
        "## ✨ Features",
        "## 🧱 Tech Stack",
        "## 🚀 Getting Started",
        "## 🛠️ Scripts",
        "## ⚙️ Environment Variables",
        "## 📂 Folder Structure",
        "## 📄 License",
    ]
    assert "## ✨ Features\n\n- ⚛️ Built with React for component-driven UI\n\n---\n\n## 🧱" in readme
    assert (
        "| React | Frontend framework for building UIs |\n"
        "| Vite | Frontend build tool and dev server |\n"
        "| JavaScript | Programming language for web apps |\n"
    ) in readme
    assert "- `dev`: vite\n- `build`: vite build\n" in readme
    assert "```env\nAPI_URL=http://localhost\nDEBUG=false\n```" in readme
    assert "```text\nsrc/\n  ├── main.jsx\n```" in readme
    assert readme.endswith("## 📄 License\n\nISC\n")
    assert readme.count("---\n") == 7


def test_assembly_is_deterministic() -> None:
    args = (
        ManifestData(name="demo", scripts={"start": "node ."}),
        frozenset({TechTag.NODEJS, TechTag.EXPRESS, TechTag.MONGOOSE, TechTag.JAVASCRIPT}),
        CommandSet("npm install", "npm run dev"),
        ["🚀 Fast and lightweight backend using Express"],
        ["MONGO_URL=mongodb://localhost"],
        None,
    )

    assert assemble_readme(*args) == assemble_readme(*args)


def test_defaults_fill_missing_manifest_fields() -> None:
    defaults = ReadmeDefaults(title="Fallback", description="Nothing yet", license="Unlicense")

    readme = assemble_readme(
        ManifestData(), frozenset({TechTag.JAVASCRIPT}), _NPM, [], [], None, defaults=defaults
    )

    assert readme.startswith("# 📘 Fallback\n\nNothing yet\n")
    assert readme.endswith("Unlicense\n")


def test_custom_templates_dir_overrides_bundled_template(tmp_path: Path) -> None:
    (tmp_path / "readme.md.j2").write_text(
        "# {{ title }}\n{% for row in stack %}{{ row.name }};{% endfor %}\n",
        encoding="utf-8",
    )

    readme = ReadmeAssembler(tmp_path).assemble(
        ManifestData(name="custom"),
        frozenset({TechTag.JAVASCRIPT, TechTag.HTML}),
        _NPM,
        [],
        [],
        None,
    )

    assert readme == "# custom\nHTML;JavaScript;\n"


def test_missing_custom_template_falls_back_to_bundled(tmp_path: Path) -> None:
    readme = ReadmeAssembler(tmp_path).assemble(
        ManifestData(name="demo"), frozenset({TechTag.JAVASCRIPT}), _NPM, [], [], None
    )

    assert readme.startswith("# 📘 demo\n")
