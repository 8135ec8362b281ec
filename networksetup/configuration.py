"""
Network configuration operations for networksetup.

One function per setting category. Each builds its commands with the
arguments module, runs them in order and returns the exit status of the
last one. Keyword options (executable, sudo) are forwarded to run_command.
"""

from . import arguments
from .logging_config import get_logger
from .models import host_list, service_name
from .utils import run_command

# Get module logger
logger = get_logger(__name__)


def run_commands(commands, **options):
    """Run each command in turn and return the last exit status."""
    status = None
    for args in commands:
        status = run_command(args, **options)
    return status


def set_auto_proxy_discovery(network, enable, **options):
    """Turns automatic proxy discovery on or off for a network service."""
    logger.info(
        f"Turning auto proxy discovery {'on' if enable else 'off'} for '{service_name(network)}'"
    )
    return run_commands(arguments.auto_proxy_discovery_commands(network, enable), **options)


def set_auto_proxy(network, url, **options):
    """Sets the automatic proxy configuration for a network service."""
    if url.is_value:
        logger.info(f"Setting auto proxy URL for '{service_name(network)}' to {url.value}")
    else:
        logger.info(f"Turning auto proxy {url.state.value} for '{service_name(network)}'")
    return run_commands(arguments.auto_proxy_commands(network, url), **options)


def _log_proxy(kind, network, setup):
    service = service_name(network)
    if setup.is_value:
        address = setup.value
        auth = " with authentication" if address.credentials else ""
        logger.info(
            f"Setting {kind} proxy for '{service}' to {address.host}:{address.port}{auth}"
        )
    else:
        logger.info(f"Turning {kind} proxy {setup.state.value} for '{service}'")


def set_ftp_proxy(network, setup, **options):
    """Sets the FTP proxy for a network service."""
    _log_proxy("FTP", network, setup)
    return run_commands(arguments.ftp_proxy_commands(network, setup), **options)


def set_web_proxy(network, setup, **options):
    """Sets the web (HTTP) proxy for a network service."""
    _log_proxy("web", network, setup)
    return run_commands(arguments.web_proxy_commands(network, setup), **options)


def set_secure_web_proxy(network, setup, **options):
    """Sets the secure web (HTTPS) proxy for a network service."""
    _log_proxy("secure web", network, setup)
    return run_commands(arguments.secure_web_proxy_commands(network, setup), **options)


def set_socks_proxy(network, setup, **options):
    """
    Sets the SOCKS proxy for a network service.

    Turning it off runs two commands: the first blanks host and port, the
    second disables the proxy. The status of the second one is returned.
    """
    _log_proxy("SOCKS", network, setup)
    return run_commands(arguments.socks_proxy_commands(network, setup), **options)


def set_dns_servers(network, hosts, **options):
    """Sets the DNS servers for a network service; an empty list clears them."""
    hosts = host_list(hosts)
    if hosts:
        logger.info(f"Setting DNS servers for '{service_name(network)}' to: {hosts}")
    else:
        logger.info(f"Clearing DNS servers for '{service_name(network)}'")
    return run_commands(arguments.dns_servers_commands(network, hosts), **options)


def set_proxy_bypass_domains(network, hosts, **options):
    """Sets the proxy bypass domains for a network service; an empty list clears them."""
    hosts = host_list(hosts)
    if hosts:
        logger.info(f"Setting {len(hosts)} bypass domains for '{service_name(network)}'")
        logger.debug(f"Bypass domains for '{service_name(network)}': {hosts}")
    else:
        logger.info(f"Clearing bypass domains for '{service_name(network)}'")
    return run_commands(arguments.proxy_bypass_domains_commands(network, hosts), **options)
