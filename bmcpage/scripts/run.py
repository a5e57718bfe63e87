#!/usr/bin/env python3
"""
Command-line front end for the management console helpers
"""
import logging
from typing import Optional, Tuple

import click

from bmcpage.config import BMC_BASE_URL, BMC_HTTP_TIMEOUT, BMC_SESSION_FILE
from bmcpage.page import (
    Dispatcher,
    FeatureTag,
    FileSessionStore,
    NotificationStore,
    PageError,
    RendererRegistry,
    from_wire,
    to_wire,
)
from bmcpage.page.constants import OUTCOME_UNSET
from bmcpage.ui.cli_presenter import alert, make_payload_printer, show_toast


def setup_logging(debug: bool = False):
    """Setup logging configuration"""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _parse_pairs(pairs: Tuple[str, ...]) -> Optional[dict]:
    if not pairs:
        return None
    form = {}
    for pair in pairs:
        if '=' not in pair:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint='--data')
        key, value = pair.split('=', 1)
        form[key] = value
    return form


def _build_dispatcher(ctx) -> Dispatcher:
    obj = ctx.obj
    notifications = NotificationStore(FileSessionStore(obj['session_file']), show_toast)
    return Dispatcher(
        notifications,
        base_url=obj['base_url'],
        timeout=obj['timeout'],
        on_transport_error=alert,
    )


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--base-url', default=BMC_BASE_URL, show_default=True, help='Management controller address')
@click.option('--timeout', type=float, default=BMC_HTTP_TIMEOUT, show_default=True, help='Request timeout in seconds')
@click.option('--session-file', type=click.Path(dir_okay=False), default=str(BMC_SESSION_FILE),
              show_default=True, help='File holding the pending save notification')
@click.pass_context
def cli(ctx, debug, base_url, timeout, session_file):
    """bmcpage: talk to the management controller's web API"""
    setup_logging(debug)
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    ctx.obj['base_url'] = base_url
    ctx.obj['timeout'] = timeout
    ctx.obj['session_file'] = session_file


@cli.command()
@click.argument('url')
@click.option('--tag', '-t', default=FeatureTag.OTHER.value, show_default=True,
              help='Page tag the payload is rendered for')
@click.pass_context
def get(ctx, url: str, tag: str):
    """Load page data from URL and render it for TAG"""
    dispatcher = _build_dispatcher(ctx)
    dispatcher.renderers = RendererRegistry({t: make_payload_printer(t.value) for t in FeatureTag})
    try:
        rendered = dispatcher.load(url, tag)
    except PageError as e:
        click.echo(f"❌ {e}", err=True)
        ctx.exit(1)
    if not rendered and tag not in dispatcher.renderers:
        click.echo(f"⚠️  No page renders tag '{tag}', payload dropped")


@cli.command(name='set')
@click.argument('url')
@click.option('--data', '-d', multiple=True, help='Form field as key=value (repeatable)')
@click.option('--show', is_flag=True, help='Show the resulting notification immediately')
@click.pass_context
def set_(ctx, url: str, data: Tuple[str, ...], show: bool):
    """Save settings by POSTing to URL; the outcome is shown on the next `notify`"""
    dispatcher = _build_dispatcher(ctx)
    try:
        outcome = dispatcher.submit(url, _parse_pairs(data))
    except PageError as e:
        click.echo(f"❌ {e}", err=True)
        ctx.exit(1)
    click.echo(f"Recorded outcome: {outcome}")
    if show:
        dispatcher.notifications.consume_and_clear()


@cli.command()
@click.pass_context
def notify(ctx):
    """Show and clear the pending save notification"""
    notifications = NotificationStore(FileSessionStore(ctx.obj['session_file']), show_toast)
    if notifications.consume_and_clear() == OUTCOME_UNSET:
        click.echo("No pending notification")


@cli.group()
def flag():
    """Convert between switch states and the device's 0/1 flags"""
    pass


@flag.command()
@click.argument('value', type=click.BOOL)
def encode(value: bool):
    """Print the wire flag for a boolean VALUE"""
    click.echo(to_wire(value))


@flag.command()
@click.argument('value')
def decode(value: str):
    """Print the boolean a wire VALUE decodes to"""
    try:
        parsed = float(value)
    except ValueError:
        parsed = value
    click.echo('true' if from_wire(parsed) else 'false')


if __name__ == '__main__':
    cli()
