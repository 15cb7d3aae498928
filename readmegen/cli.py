"""CLI entrypoints for readmegen commands."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import ConfigError, ReadmeGenConfig, load_config
from .generator import ReadmeGenerator
from .inference import describe
from .logging import configure_logging
from .models import ordered_stack
from .signals import ManifestError, ManifestNotFoundError


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readmegen",
        description="Generate a README from a project's manifest, env example and layout.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Write a README inferred from the project (overwrites the existing one).",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_path_argument(generate_parser)
    generate_parser.add_argument(
        "--output",
        help="README file name relative to the project root (default: README.md).",
    )
    generate_parser.add_argument(
        "--tree-root",
        help="Directory rendered in the folder structure section (default: src).",
    )
    generate_parser.add_argument(
        "--depth",
        type=_positive_int,
        help="Maximum folder structure depth (default: 2).",
    )
    generate_parser.add_argument(
        "--unsorted",
        action="store_true",
        help="Keep filesystem listing order in the folder structure.",
    )
    generate_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the README instead of writing it.",
    )

    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Show the inferred stack, commands and features without writing.",
    )
    _add_verbose_option(inspect_parser, suppress_default=True)
    _add_path_argument(inspect_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for readmegen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = _apply_overrides(load_config(Path(args.path)), args)
    except ConfigError as exc:
        parser.exit(1, f"Invalid configuration: {exc}\n")

    generator = ReadmeGenerator(config=config)

    if args.command == "generate":
        try:
            outcome = generator.run(args.path, dry_run=bool(args.dry_run))
        except ManifestNotFoundError as exc:
            parser.exit(1, f"❌ {exc}\n")
        except (ManifestError, OSError) as exc:
            parser.exit(1, f"readmegen generate failed: {exc}\nRun with --verbose for more details.\n")
        if outcome.written:
            print(f"✅ {_relativize(outcome.path)} generated successfully!")
        else:
            sys.stdout.write(outcome.content)
    elif args.command == "inspect":
        try:
            inference = generator.inspect(args.path)
        except ManifestNotFoundError as exc:
            parser.exit(1, f"❌ {exc}\n")
        except (ManifestError, OSError) as exc:
            parser.exit(1, f"readmegen inspect failed: {exc}\n")
        print("Tech stack:")
        for tag in ordered_stack(inference.stack):
            print(f"  {tag.value}: {describe(tag)}")
        print(f"Install: {inference.commands.install}")
        print(f"Run: {inference.commands.run}")
        if inference.features:
            print("Features:")
            for feature in inference.features:
                print(f"  - {feature}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _apply_overrides(config: ReadmeGenConfig, args: argparse.Namespace) -> ReadmeGenConfig:
    tree = config.tree
    tree_root = getattr(args, "tree_root", None)
    depth = getattr(args, "depth", None)
    if tree_root or depth or getattr(args, "unsorted", False):
        tree = replace(
            tree,
            root=tree_root or tree.root,
            depth=depth or tree.depth,
            sort=tree.sort and not getattr(args, "unsorted", False),
        )
    output = getattr(args, "output", None) or config.output
    return replace(config, tree=tree, output=output)


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
