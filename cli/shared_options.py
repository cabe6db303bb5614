"""
Shared CLI Option Decorators

Reusable Click decorators for options common to every subcommand.
"""

import click


def account_id_option(help=None):
    """Decorator for the caller account ID."""
    def decorator(f):
        return click.option(
            '--account-id', '-a',
            default=None,
            envvar='SLIDEGEN_ACCOUNT_ID',
            help=help or 'Account ID used to check the plan (default: $SLIDEGEN_ACCOUNT_ID)'
        )(f)
    return decorator

def config_option(help=None):
    """Decorator for configuration file options."""
    def decorator(f):
        return click.option(
            '--config',
            default=None,
            help=help or 'Path to configuration file'
        )(f)
    return decorator

def log_level_option(help=None):
    """Decorator for logging level options."""
    def decorator(f):
        return click.option(
            '--log-level',
            default='WARNING',
            type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
            help=help or 'Logging level'
        )(f)
    return decorator
