import shlex

import click

from . import arguments, config
from .configuration import (
    set_auto_proxy_discovery,
    set_auto_proxy,
    set_ftp_proxy,
    set_web_proxy,
    set_secure_web_proxy,
    set_socks_proxy,
    set_dns_servers,
    set_proxy_bypass_domains,
)
from .exceptions import LaunchError
from .logging_config import setup_logging
from .models import Address, Config, Network
from .utils import build_command_line, redact_command

STATE_CHOICE = click.Choice([config.ON, config.OFF], case_sensitive=False)


class OrderedGroup(click.Group):
    """Custom Click group that preserves command order."""

    def list_commands(self, ctx):
        return list(self.commands.keys())


@click.group(cls=OrderedGroup)
@click.option("--debug/--no-debug", default=None, help="Enable debug logging.")
@click.option(
    "--sudo/--no-sudo", default=None, help="Run networksetup through sudo."
)
@click.option(
    "--tool",
    "tool_path",
    default=None,
    help="Path of the networksetup executable.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print the networksetup command lines instead of running them.",
)
@click.option(
    "--config-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Settings file (defaults to ~/.config/networksetup/config.toml).",
)
@click.pass_context
def cli(ctx, debug, sudo, tool_path, dry_run, config_file):
    """
    Configure macOS proxies and DNS through networksetup.

    SERVICE is the network service name as shown by
    `networksetup -listallnetworkservices`, e.g. "Wi-Fi" or "Ethernet".
    The exit status of networksetup is passed through.
    """
    settings = config.load_config(config_file)["settings"]

    if debug is None:
        debug = bool(settings.get("debug"))
    if sudo is None:
        sudo = bool(settings.get("sudo"))

    setup_logging(debug=debug, log_file=settings.get("log_file") or None)

    ctx.obj = {
        "executable": tool_path
        or settings.get("networksetup_path")
        or config.DEFAULT_NETWORKSETUP_PATH,
        "sudo": sudo,
        "dry_run": dry_run,
    }


def _apply(ctx, operation, builder, network, value):
    """Run an operation, or print its command lines when --dry-run is set."""
    options = {"executable": ctx.obj["executable"], "sudo": ctx.obj["sudo"]}

    if ctx.obj["dry_run"]:
        for args in builder(network, value):
            click.echo(shlex.join(redact_command(build_command_line(args, **options))))
        return

    try:
        status = operation(network, value, **options)
    except LaunchError as e:
        raise click.ClickException(str(e))

    if status != 0:
        click.echo(f"networksetup exited with status {status}", err=True)
    ctx.exit(status)


def _proxy_setup(state, host, port, username, password):
    """Turn the proxy command's arguments into a Config."""
    if state and (host or port or username or password):
        raise click.UsageError(
            "Give either on/off or --host and --port (with optional credentials), not both."
        )
    if state:
        return Config.on() if state == config.ON else Config.off()
    if not (host and port):
        raise click.UsageError("Give on, off, or both --host and --port.")

    address = Address(host, port)
    if username or password:
        if not (username and password):
            raise click.UsageError("--username and --password must be given together.")
        address = address.auth(username, password)
    return Config.set(address)


@cli.command()
@click.argument("service")
@click.argument("state", type=STATE_CHOICE)
@click.pass_context
def autodiscovery(ctx, service, state):
    """Turn automatic proxy discovery on or off."""
    _apply(
        ctx,
        set_auto_proxy_discovery,
        arguments.auto_proxy_discovery_commands,
        Network.named(service),
        state == config.ON,
    )


@cli.command()
@click.argument("service")
@click.argument("value")
@click.pass_context
def autoproxy(ctx, service, value):
    """Set the PAC URL, or turn the automatic proxy on/off."""
    if value.lower() == config.ON:
        url = Config.on()
    elif value.lower() == config.OFF:
        url = Config.off()
    else:
        url = Config.set(value)
    _apply(ctx, set_auto_proxy, arguments.auto_proxy_commands, Network.named(service), url)


def _proxy_command(name, kind, operation, builder):
    @cli.command(name=name, help=f"Set the {kind} proxy, or turn it on/off.")
    @click.argument("service")
    @click.argument("state", required=False, type=STATE_CHOICE)
    @click.option("--host", default=None, help="Proxy host name or address.")
    @click.option("--port", default=None, help="Proxy port.")
    @click.option("--username", default=None, help="Proxy user (requires --password).")
    @click.option("--password", default=None, help="Proxy password (requires --username).")
    @click.pass_context
    def command(ctx, service, state, host, port, username, password):
        setup = _proxy_setup(state, host, port, username, password)
        _apply(ctx, operation, builder, Network.named(service), setup)

    return command


ftp_proxy = _proxy_command("ftp-proxy", "FTP", set_ftp_proxy, arguments.ftp_proxy_commands)
web_proxy = _proxy_command("web-proxy", "web (HTTP)", set_web_proxy, arguments.web_proxy_commands)
secure_web_proxy = _proxy_command(
    "secure-web-proxy",
    "secure web (HTTPS)",
    set_secure_web_proxy,
    arguments.secure_web_proxy_commands,
)
socks_proxy = _proxy_command(
    "socks-proxy", "SOCKS", set_socks_proxy, arguments.socks_proxy_commands
)


@cli.command()
@click.argument("service")
@click.argument("servers", nargs=-1)
@click.pass_context
def dns(ctx, service, servers):
    """Set the DNS servers; with none given the list is cleared."""
    _apply(
        ctx,
        set_dns_servers,
        arguments.dns_servers_commands,
        Network.named(service),
        list(servers),
    )


@cli.command()
@click.argument("service")
@click.argument("domains", nargs=-1)
@click.pass_context
def bypass(ctx, service, domains):
    """Set the proxy bypass domains; with none given the list is cleared."""
    _apply(
        ctx,
        set_proxy_bypass_domains,
        arguments.proxy_bypass_domains_commands,
        Network.named(service),
        list(domains),
    )


if __name__ == "__main__":
    cli()
