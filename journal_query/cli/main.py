"""Main CLI interface for the journal query system."""

import click
from pathlib import Path
from typing import Dict, Tuple
import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from journal_query.application.config import Config
from journal_query.application.journalctl import JournalctlCommand
from journal_query.application.query_model import QueryModel
from journal_query.domain import catalog
from journal_query.domain.errors import ValidationError

console = Console()


def parse_filter_options(values: Tuple[str, ...]) -> Dict[str, str]:
    """Turn repeated NAME=VALUE options into raw filter inputs.

    Repeating a name appends to its raw value, so ``-f unit=a -f unit=b``
    reads the same as ``-f "unit=a b"``.
    """
    inputs: Dict[str, str] = {}
    for item in values:
        name, sep, value = item.partition("=")
        if not sep:
            raise click.BadParameter(f"expected NAME=VALUE, got {item!r}", param_hint="--filter")
        name = name.strip()
        inputs[name] = f"{inputs[name]} {value}" if name in inputs else value
    return inputs


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True), help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.pass_context
def cli(ctx, config, verbose):
    """Journal Query - build systemd journal queries from raw input."""
    ctx.ensure_object(dict)

    # Load configuration
    if config:
        config_obj = Config.load_from_file(Path(config))
    else:
        config_obj = Config()

    if verbose:
        config_obj.log_level = "DEBUG"

    ctx.obj['config'] = config_obj
    ctx.obj['model'] = QueryModel(config_obj)


@cli.command()
def intervals():
    """List the selectable time intervals."""
    table = Table(title="Intervals")
    table.add_column("Tag", style="cyan")
    table.add_column("Label", style="magenta")

    for option in catalog.intervals():
        table.add_row(option.tag, option.label)

    console.print(table)


@cli.command()
def filters():
    """List the supported filters."""
    table = Table(title="Filters")
    table.add_column("Name", style="cyan")
    table.add_column("Label", style="magenta")
    table.add_column("Multiple", style="yellow")
    table.add_column("Allowed values")

    for spec in catalog.filters():
        allowed = ", ".join(spec.allowed_values) if spec.allowed_values else "free text"
        table.add_row(spec.name, spec.label, "yes" if spec.multiple else "no", allowed)

    console.print(table)


@cli.command()
@click.option('--interval', '-i', help='Interval tag (see "intervals")')
@click.option('--since', help='Range start (ISO 8601)')
@click.option('--until', help='Range end (ISO 8601)')
@click.option('--filter', '-f', 'filter_options', multiple=True, help='Filter as NAME=VALUE')
@click.option('--disable', multiple=True, help='Filter to ignore even if a value is given')
@click.option('--format', 'output_format', default='rich',
              type=click.Choice(['rich', 'plain', 'json', 'journalctl']))
@click.pass_context
def build(ctx, interval, since, until, filter_options, disable, output_format):
    """Build a query and print it."""
    model = ctx.obj['model']
    config = ctx.obj['config']

    if since or until:
        if interval not in (None, catalog.RANGE_TAG):
            raise click.UsageError("--since/--until can only be used with the range interval")
        interval_input = {"since": since, "until": until}
    else:
        interval_input = interval or config.default_interval

    filter_inputs = parse_filter_options(filter_options)
    enabled = {name: name not in disable for name in filter_inputs}
    for name in disable:
        enabled.setdefault(name, False)

    try:
        query = model.build(interval_input, filter_inputs, enabled)
    except ValidationError as e:
        console.print(f"[red]Invalid query: {e}[/red]")
        ctx.exit(1)

    if output_format == 'json':
        console.print(json.dumps(query.to_dict(), indent=2), markup=False, highlight=False, soft_wrap=True)

    elif output_format == 'plain':
        console.print(query.describe(), markup=False, highlight=False, soft_wrap=True)

    elif output_format == 'journalctl':
        console.print(str(JournalctlCommand(query, config)), markup=False, highlight=False, soft_wrap=True)

    else:  # rich format
        table = Table(title="Filters")
        table.add_column("Name", style="cyan")
        table.add_column("Value", style="magenta")
        for name, value in query.filters.items():
            table.add_row(name, ", ".join(value) if isinstance(value, tuple) else value)

        if query.is_range:
            since_value = query.interval.since or "the beginning"
            until_value = query.interval.until or "now"
            interval_text = f"{since_value} - {until_value}"
        else:
            interval_text = catalog.interval_option(query.interval.tag).label

        console.print(Panel(interval_text, title="Interval", border_style="green"))
        if query.filters:
            console.print(table)
        else:
            console.print("[dim]No filters[/dim]")


@cli.command()
@click.pass_context
def config_show(ctx):
    """Show current configuration."""
    config = ctx.obj['config']

    config_json = json.dumps(config.model_dump(mode="json"), indent=2)

    panel = Panel(
        config_json,
        title="Current Configuration",
        border_style="green"
    )
    console.print(panel)


@cli.command()
@click.option('--output', '-o', required=True, help='Output file path')
@click.pass_context
def config_save(ctx, output):
    """Save current configuration to file."""
    config = ctx.obj['config']
    output_path = Path(output)

    try:
        config.save_to_file(output_path)
        console.print(f"[green]Configuration saved to {output_path}[/green]")
    except ValueError as e:
        console.print(f"[red]Error saving configuration: {e}[/red]")
        ctx.exit(1)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
