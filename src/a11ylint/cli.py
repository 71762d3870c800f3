"""a11ylint CLI entry point."""
from __future__ import annotations

import logging
import os
import sys

import click

from a11ylint.config import CONFIG_FILENAMES, DEFAULT_CONFIG_TEMPLATE, load_config
from a11ylint.dom import Document
from a11ylint.engine import Engine
from a11ylint.models import InvalidDocumentError
from a11ylint.reporter import Reporter
from a11ylint.rules import PACKS, load_rules

logger = logging.getLogger("a11ylint")


def _configure_logging() -> None:
    level = os.environ.get("A11YLINT_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.group()
def main():
    """a11ylint - WCAG accessibility checks for rendered HTML."""
    _configure_logging()


@main.command()
@click.argument("html_file", type=click.File("r", encoding="utf-8", errors="replace"))
@click.option("--url", default=None, help="Source identifier recorded in the report (defaults to the file name)")
@click.option("--project-dir", default=None, help="Directory holding a11ylint.yml")
@click.option("--pack", "packs", multiple=True, help="Active pack (repeatable); overrides config")
@click.option("--format", "output_format", type=click.Choice(["json", "text"]), default="json",
              help="Report format")
def check(html_file, url: str | None, project_dir: str | None, packs: tuple[str, ...], output_format: str):
    """Audit an HTML file ('-' reads stdin)."""
    project_dir = project_dir or os.getcwd()
    config = load_config(project_dir)
    if packs:
        config.packs = list(packs)

    source = url if url is not None else ("" if html_file.name == "<stdin>" else html_file.name)
    markup = html_file.read()

    try:
        document = Document.from_html(markup, source=source)
        engine = Engine(config=config, rules=load_rules(config.packs))
        report = engine.audit(document)
    except InvalidDocumentError as exc:
        click.echo(f"Error: invalid document: {exc}", err=True)
        sys.exit(2)

    reporter = Reporter(report)
    if output_format == "text":
        click.echo(reporter.format_text())
    else:
        click.echo(reporter.format_json())

    sys.exit(reporter.exit_code())


@main.command()
@click.option("--project-dir", default=None, help="Project directory")
def init(project_dir: str | None):
    """Write a default a11ylint.yml."""
    project_dir = project_dir or os.getcwd()
    config_path = os.path.join(project_dir, CONFIG_FILENAMES[0])
    if os.path.exists(config_path):
        click.echo(f"{config_path} already exists, leaving it untouched.")
        return

    with open(config_path, "w") as f:
        f.write(DEFAULT_CONFIG_TEMPLATE)

    click.echo(f"Created {config_path}")


@main.command("list-rules")
@click.option("--pack", default=None, help="Filter rules by pack name")
def list_rules(pack: str | None):
    """List all available rules in evaluation order."""
    rules = load_rules(list(PACKS) if pack is None else [pack])

    if not rules:
        if pack:
            click.echo(f"No rules found for pack '{pack}'.")
        else:
            click.echo("No rules found.")
        return

    click.echo(f"{'Rule ID':<30} {'Pack':<10} {'Impact':<10} Description")
    click.echo("-" * 100)

    for rule in rules:
        click.echo(f"{rule.id:<30} {rule.pack:<10} {rule.impact.value:<10} {rule.description}")

    click.echo(f"\n{len(rules)} rules total.")


if __name__ == "__main__":
    main()
