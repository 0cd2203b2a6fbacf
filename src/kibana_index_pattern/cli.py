"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from kibana_index_pattern.index_pattern import IndexPatternError, IndexPatternGenerator
from kibana_index_pattern.index_pattern.constants import DEFAULT_TIME_FIELD


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="kibana-index-pattern")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress to stderr.")
def cli(verbose: bool) -> None:
    """Kibana index pattern generator for beats."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="generate")
@click.option(
    "--index",
    "index_name",
    required=True,
    help="Index pattern title and saved object id, e.g. 'metricbeat-*'",
)
@click.option(
    "--name",
    "filename_prefix",
    required=True,
    help="Output file name; characters other than letters and digits are removed",
)
@click.option(
    "--beat-dir",
    "beat_dir",
    required=True,
    type=click.Path(path_type=str),
    help="Beat directory containing fields.yml",
)
@click.option(
    "--kibana-version",
    "kibana_version",
    required=True,
    help="Kibana version recorded in the default index pattern",
)
@click.option(
    "--time-field",
    "time_field_name",
    required=False,
    default=DEFAULT_TIME_FIELD,
    show_default=True,
    help="Time field of the index pattern; pass an empty value to omit it",
)
def generate(
    index_name: str,
    filename_prefix: str,
    beat_dir: str,
    kibana_version: str,
    time_field_name: str,
) -> None:
    """Write the 5.x and default index pattern files of a beat."""
    try:
        generator = IndexPatternGenerator(
            index_name,
            filename_prefix,
            beat_dir,
            kibana_version,
            time_field_name=time_field_name or None,
        )
        generated = generator.generate()
    except IndexPatternError as exc:
        raise CliError(str(exc)) from exc
    for pattern in generated:
        click.echo(str(pattern.path))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
