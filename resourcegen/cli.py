"""Command-line entry point for resource generation.

Usage::

    resourcegen Post
    resourcegen Post --view --soft-deletes
    resourcegen App\\Models\\Post --simple --generate --fields post.yaml
    python -m resourcegen.cli Post --cluster App\\Filament\\Clusters\\Blog --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from rich.markup import escape
from rich.syntax import Syntax

from resourcegen.config import Config
from resourcegen.scaffolder.fields import EmptyFieldSource, FieldSourceError, FileFieldSource
from resourcegen.scaffolder.generator import ResourceScaffolder
from resourcegen.utils import console, print_error, print_success, print_summary_table, print_warning


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resourcegen",
        description="Generate a Filament resource class and its pages for an Eloquent model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  resourcegen Post\n"
            "  resourcegen Post --view --soft-deletes\n"
            "  resourcegen Post --simple --generate --fields post.yaml\n"
        ),
    )

    parser.add_argument("model", help="Model class name or fully qualified name")
    parser.add_argument("--cluster", default=None, help="FQN of the cluster the resource belongs to")
    parser.add_argument("--view", action="store_true", help="Generate a view page and infolist")
    parser.add_argument(
        "--soft-deletes", action="store_true", help="The model uses soft deletes"
    )
    parser.add_argument(
        "--simple", action="store_true", help="Manage records in modals on a single page"
    )
    parser.add_argument(
        "--generate", action="store_true", help="Generate form fields and table columns"
    )
    parser.add_argument(
        "--fields", default=None, help="JSON or YAML file listing the model's fields"
    )
    parser.add_argument(
        "--output", "-o", default=None, help="Project root to write into (default: config or .)"
    )
    parser.add_argument("--config", default=None, help="Path to a saved JSON configuration")
    parser.add_argument("--force", action="store_true", help="Overwrite existing files")
    parser.add_argument(
        "--dry-run", action="store_true", help="Print the generated source instead of writing"
    )
    return parser


def load_config(path: str | None, output: str | None) -> Config:
    """Configuration from *path* (or the environment), with *output* applied on top."""
    config = Config.load(Path(path)) if path else Config.from_env()
    if output:
        config = config.model_copy(update={"output_dir": Path(output)})
    return config


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``resourcegen`` / ``python -m resourcegen.cli``."""
    args = build_parser().parse_args(argv)

    if args.fields and not args.generate:
        print_warning("--fields has no effect without --generate")

    try:
        config = load_config(args.config, args.output)
        field_source = FileFieldSource(args.fields) if args.fields else EmptyFieldSource()
        scaffolder = ResourceScaffolder(config, field_source=field_source)
        spec = scaffolder.build_spec(
            args.model,
            cluster=args.cluster,
            view=args.view,
            soft_deletes=args.soft_deletes,
            simple=args.simple,
            generate=args.generate,
        )

        if args.dry_run:
            for path, source in scaffolder.render(spec).items():
                console.rule(str(path))
                console.print(Syntax(source, "php"))
            return 0

        written = asyncio.run(scaffolder.generate(spec, force=args.force))
    except (ValueError, OSError, FieldSourceError) as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1

    print_summary_table(
        {path.name: escape(str(path)) for path in written},
        title=spec.target_name,
    )
    print_success(f"Generated {len(written)} file(s).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
