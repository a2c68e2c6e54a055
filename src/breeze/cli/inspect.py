"""CLI command: breeze inspect -- show which candidates in files generate rules."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from breeze.cli.build import load_context
from breeze.engine import generate_rules, get_class_candidates, get_extractor
from breeze.errors import BreezeError
from breeze.model.candidate import WILDCARD


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON configuration file",
)
def inspect(files: tuple[str, ...], config_path: str | None) -> None:
    """List the candidates in FILES that generate rules, with their selectors."""
    try:
        context = load_context(config_path)
    except BreezeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    candidates: set[str] = set()
    seen: set[str] = set()
    for file in files:
        path = Path(file)
        extractor = get_extractor(context.config, path.suffix[1:] or None)
        get_class_candidates(
            path.read_text(encoding="utf-8"),
            extractor,
            context.content_match_cache,
            candidates,
            seen,
        )
    candidates.discard(WILDCARD)

    generate_rules(candidates, context)
    matched = 0
    for candidate in sorted(candidates):
        rules = context.class_cache.get(candidate, ())
        if not rules:
            continue
        matched += 1
        click.echo(candidate)
        for rule in rules:
            wrappers = "".join(f"@{a.name} {a.params} " for a in rule.fragment.at_rules)
            click.echo(f"  {wrappers}{rule.fragment.selector}")

    click.echo()
    click.echo(f"Summary: {matched} of {len(candidates)} candidate(s) generate rules")
