"""CLI command: breeze build -- expand layer directives in a stylesheet."""

from __future__ import annotations

import glob
import logging
import sys
from dataclasses import replace
from pathlib import Path

import click

from breeze.config import BreezeConfig, load_config
from breeze.document import parse_css
from breeze.engine import Context, expand_at_rules
from breeze.errors import BreezeError


def expand_globs(patterns: list[str]) -> list[Path]:
    """Resolve content globs to the files they match, sorted and deduplicated."""
    files = {
        Path(match)
        for pattern in patterns
        for match in glob.glob(pattern, recursive=True)
        if Path(match).is_file()
    }
    return sorted(files)


def load_context(config_path: str | None, debug: bool = False) -> Context:
    """Build a Context from an optional JSON config file."""
    config = load_config(config_path) if config_path else BreezeConfig()
    if debug and not config.debug:
        config = replace(config, debug=True)
    return Context(config)


@click.command()
@click.argument("input_css", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON configuration file",
)
@click.option("--content", multiple=True, help="Glob of template files to scan (repeatable)")
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None, help="Output file")
@click.option("--debug/--no-debug", default=False, help="Log timings and counts")
def build(
    input_css: str,
    config_path: str | None,
    content: tuple[str, ...],
    output: str | None,
    debug: bool,
) -> None:
    """Compile INPUT_CSS, replacing its @tailwind directives with generated rules.

    Template files come from the config's ``content`` globs plus any
    --content options. Writes to OUTPUT, or stdout when omitted.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        context = load_context(config_path, debug)
        files = expand_globs([*context.config.content, *content])
        context.collect_changed_files(files)
        root = parse_css(Path(input_css).read_text(encoding="utf-8"), input=input_css)
        expand_at_rules(context, root)
    except (BreezeError, OSError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    css = root.to_css()
    if output:
        Path(output).write_text(css, encoding="utf-8")
        click.echo(
            f"Wrote {output} ({len(context.rule_cache)} rules from {len(files)} file(s))",
            err=True,
        )
    else:
        click.echo(css, nl=False)
