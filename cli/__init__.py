"""
CLI Package for Slide Deck

Click group with one subcommand per MCP tool, for running the slide
generation pipeline from a terminal. The cli() function serves as the
console script entry point for setup.py.
"""

import os
import click
from dotenv import load_dotenv

# Load environment variables from .env files
# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')
from .create import create
from .transcript import transcript


@click.group()
@click.version_option(version='1.0.0', prog_name='slidedeck')
def main():
    """Slide Deck CLI - Generate presentations from text or YouTube videos."""
    pass

# Register subcommands
main.add_command(create)
main.add_command(transcript)

# Entry point for setup.py console script
def cli():
    """Console script entry point."""
    main()
