# app/contact_card/cli.py

"""
Contact Card CLI Commands

Flask CLI commands for generating artifacts from the command line:
- vCard export for a profile handle
- Apple Wallet pass export for a profile handle
- Configuration check
"""

import sys

import click
from flask import current_app
from flask.cli import with_appcontext

from app.contact_card.exceptions import PassGenerationError
from app.contact_card.generators import validate_pass_configuration
from app.contact_card.models import ContactRecord
from app.contact_card.services import contact_card_service


@click.group('contact-card')
def contact_card():
    """Contact card (vCard / Apple Wallet) commands."""
    pass


def _load_contact(handle):
    profile = current_app.extensions['profile_store'].get_by_handle(handle)
    if not profile:
        raise click.ClickException(f'Profile not found for handle: {handle}')
    return ContactRecord.from_profile(profile)


@contact_card.command()
@click.argument('handle')
@click.option('-o', '--output', type=click.Path(dir_okay=False), default=None,
              help='Write to this file instead of stdout')
@with_appcontext
def vcard(handle, output):
    """Export the vCard for HANDLE."""
    contact = _load_contact(handle)
    text = contact_card_service.generate_vcard(contact)

    if output:
        with open(output, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
        click.echo(f'Wrote {output}')
    else:
        click.echo(text)


@contact_card.command('pass')
@click.argument('handle')
@click.option('-o', '--output', type=click.Path(dir_okay=False), default=None,
              help='Output file (defaults to the download filename)')
@with_appcontext
def wallet_pass(handle, output):
    """Export the Apple Wallet pass for HANDLE."""
    contact = _load_contact(handle)

    try:
        artifact = contact_card_service.generate_apple_wallet_pass(contact)
    except PassGenerationError as e:
        raise click.ClickException(f'Error generating pass: {e}')

    output = output or artifact.filename(handle)
    with open(output, 'wb') as f:
        f.write(artifact.to_bytes())

    if artifact.is_signed:
        click.echo(f'Wrote signed pass {output}')
    else:
        click.echo(f'Wrote development diagnostic {output} (no signing certificates found)')


@contact_card.command('check-config')
def check_config():
    """Report Apple Wallet configuration issues."""
    report = validate_pass_configuration(contact_card_service.config)

    click.echo(f"Configured: {'yes' if report['configured'] else 'no'}")
    click.echo(f"Signing available: {'yes' if report['signing_available'] else 'no'}")
    for issue in report['issues']:
        click.echo(f'  - {issue}')

    if not report['configured']:
        sys.exit(1)


def register_cli(app):
    """Register contact card CLI commands with Flask app."""
    app.cli.add_command(contact_card)
