"""Click CLI for srtparse — parse, validate, time."""

import json
import sys
from pathlib import Path

import click

from srtparse.log import setup_logging, get_logger
from srtparse.exceptions import SrtParseError

logger = get_logger(__name__)


def _fail(error: SrtParseError) -> None:
    line = error.details.get('line')
    where = f" (line {line})" if line else ''
    click.echo(f"Error{where}: {error.message}", err=True)
    sys.exit(1)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging.')
@click.option('--log-file', default=None, type=click.Path(), help='Also write log output to this file.')
def cli(verbose, log_file):
    """srtparse — strict SubRip (SRT) subtitle parser."""
    setup_logging('DEBUG' if verbose else 'INFO', log_file=log_file)


@cli.command()
@click.argument('srt_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', default=None, type=click.Path(), help='Write JSON here instead of stdout.')
@click.option('--indent', default=2, type=int, help='JSON indentation (default: 2).')
@click.option('--encoding', default='utf-8-sig', help='Input file encoding.')
def parse(srt_file, output, indent, encoding):
    """Parse an SRT file and emit its subtitles as JSON."""
    from srtparse.parser import parse_subtitles_file

    try:
        subtitles = parse_subtitles_file(Path(srt_file), encoding=encoding)
    except SrtParseError as e:
        _fail(e)

    payload = json.dumps([s.to_dict() for s in subtitles], indent=indent, ensure_ascii=False)
    if output:
        Path(output).write_text(payload + '\n', encoding='utf-8')
        click.echo(f"Parsed {len(subtitles)} subtitles -> {output}")
    else:
        click.echo(payload)


@cli.command()
@click.argument('srt_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--encoding', default='utf-8-sig', help='Input file encoding.')
def validate(srt_file, encoding):
    """Check that an SRT file parses cleanly."""
    from srtparse.parser import parse_subtitles_file

    try:
        subtitles = parse_subtitles_file(Path(srt_file), encoding=encoding)
    except SrtParseError as e:
        _fail(e)

    last_end = subtitles[-1].end if subtitles else 0.0
    logger.debug("Validated %s", srt_file)
    click.echo(f"OK: {len(subtitles)} subtitles, last ends at {last_end:.3f}s")


@cli.command()
@click.argument('timestamp')
def time(timestamp):
    """Convert an SRT timestamp (HH:MM:SS,mmm) to seconds."""
    from srtparse.timing import parse_time

    try:
        seconds = parse_time(timestamp)
    except SrtParseError as e:
        _fail(e)

    click.echo(f"{seconds}")


if __name__ == '__main__':
    cli()
