"""
Create Subcommand Module

Runs the full slide generation pipeline for one piece of text or one
YouTube URL and prints the resulting links as JSON.
"""

import json
import logging
import sys
from typing import Optional

import click

from slidegen.config import SlideGenConfig
from slidegen.errors import SlideGenError
from slidegen.generation import create_presentation
from slidegen.logging_config import configure_logging

from .help_texts import CONFIG_HELP, CREATE_HELP, CREATE_TEXT_HELP, exit_code_for
from .shared_options import account_id_option, config_option, log_level_option

logger = logging.getLogger(__name__)


@click.command(help=CREATE_HELP)
@click.option("--text", "-t", required=True, help=CREATE_TEXT_HELP)
@account_id_option()
@config_option(help=CONFIG_HELP)
@log_level_option()
def create(text: str, account_id: Optional[str], config: Optional[str], log_level: str):
    """Generate a presentation and print its links."""
    configure_logging(level=log_level)

    try:
        slidegen_config = SlideGenConfig.load_from_yaml(config)
        result = create_presentation(text, account_id, slidegen_config)
    except SlideGenError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(exit_code_for(e))

    click.echo(json.dumps(result.to_dict(), indent=2))
