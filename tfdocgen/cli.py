"""Command line interface: ``tfdocgen [-v] generate [PATH]``."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import GeneratorConfig, load_config
from .errors import GenerationError
from .generator import Generator
from .logging import configure_logging


def _verbosity(default: object) -> argparse.ArgumentParser:
    # Shared by the root parser and each subcommand so -v works on either
    # side of the command name. Subcommands default to SUPPRESS so they do
    # not reset a flag given before the command.
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default,
        help="Log debug output from every stage.",
    )
    return parent


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tfdocgen",
        description="Generate Terraform provider documentation from its schema.",
        parents=[_verbosity(False)],
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Fill in missing docs and render the website directory.",
        parents=[_verbosity(argparse.SUPPRESS)],
    )
    generate_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the provider root (defaults to current directory).",
    )
    generate_parser.add_argument(
        "--provider-name",
        help="Provider name, e.g. terraform-provider-widget (defaults to the directory name).",
    )
    generate_parser.add_argument(
        "--tf-path",
        help="Terraform executable to use for schema export.",
    )
    generate_parser.add_argument(
        "--website-tmp-dir",
        type=Path,
        help="Fixed scratch directory; wiped before and removed after the run.",
    )
    generate_parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write logs to this file.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for tfdocgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=getattr(args, "log_file", None))

    if args.command == "generate":
        try:
            config = load_config(Path(args.path)).with_overrides(
                provider_name=args.provider_name,
                tf_path=args.tf_path,
                website_tmp_dir=args.website_tmp_dir,
            )
            Generator(config).generate()
        except GenerationError as exc:
            parser.exit(1, f"tfdocgen generate failed: {exc}\nRun with --verbose for more details.\n")
        print(f"Website rendered at {_website_location(config)}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _website_location(config: GeneratorConfig) -> str:
    """Show the website path relative to the working directory when inside it."""
    website = config.rendered_website_path
    cwd = Path.cwd()
    return str(website.relative_to(cwd)) if website.is_relative_to(cwd) else str(website)


if __name__ == "__main__":
    main(sys.argv[1:])
