"""
Transcript Subcommand Module

Fetches and prints the transcript of a YouTube video.
"""

import sys
from typing import Optional

import click

from slidegen.config import SlideGenConfig
from slidegen.errors import InvalidInputError, SlideGenError
from slidegen.logging_config import configure_logging
from slidegen.youtube import fetch_transcript, is_youtube_url

from .help_texts import CONFIG_HELP, TRANSCRIPT_HELP, TRANSCRIPT_URL_HELP, exit_code_for
from .shared_options import config_option, log_level_option


@click.command(help=TRANSCRIPT_HELP)
@click.option("--url", "-u", required=True, help=TRANSCRIPT_URL_HELP)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the transcript to this file instead of stdout",
)
@config_option(help=CONFIG_HELP)
@log_level_option()
def transcript(url: str, output: Optional[str], config: Optional[str], log_level: str):
    """Fetch a YouTube transcript."""
    configure_logging(level=log_level)

    try:
        if not is_youtube_url(url):
            raise InvalidInputError(f"Invalid YouTube URL: {url}")
        text = fetch_transcript(url, SlideGenConfig.load_from_yaml(config))
    except SlideGenError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(exit_code_for(e))

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
        click.echo(f"✅ Transcript written to {output}")
    else:
        click.echo(text)
