"""
Argument construction for networksetup invocations.

Each builder maps a (service, state) pair onto the list of commands an
operation runs. A command is the argument list that follows the executable.
Nothing here touches the system, so the results can be inspected directly.
"""

from .config import ON, OFF, EMPTY
from .models import host_list, service_name

# networksetup flag stems for the proxies that take host, port and auth
FTP_PROXY = "ftpproxy"
WEB_PROXY = "webproxy"
SECURE_WEB_PROXY = "securewebproxy"
SOCKS_PROXY = "socksfirewallproxy"


def auto_proxy_discovery_commands(network, enable):
    """Commands to turn automatic proxy discovery on or off."""
    return [["-setproxyautodiscovery", service_name(network), ON if enable else OFF]]


def auto_proxy_commands(network, url):
    """Commands for the automatic proxy configuration (PAC) URL."""
    service = service_name(network)
    if url.is_off:
        return [["-setautoproxystate", service, OFF]]
    if url.is_on:
        return [["-setautoproxystate", service, ON]]
    return [["-setautoproxyurl", service, url.value]]


def _proxy_commands(stem, network, setup):
    service = service_name(network)
    if setup.is_off:
        return [[f"-set{stem}state", service, OFF]]
    if setup.is_on:
        return [[f"-set{stem}state", service, ON]]
    return [[f"-set{stem}", service] + setup.value.as_args()]


def ftp_proxy_commands(network, setup):
    """Commands for the FTP proxy."""
    return _proxy_commands(FTP_PROXY, network, setup)


def web_proxy_commands(network, setup):
    """Commands for the web (HTTP) proxy."""
    return _proxy_commands(WEB_PROXY, network, setup)


def secure_web_proxy_commands(network, setup):
    """Commands for the secure web (HTTPS) proxy."""
    return _proxy_commands(SECURE_WEB_PROXY, network, setup)


def socks_proxy_commands(network, setup):
    """
    Commands for the SOCKS proxy.

    networksetup does not switch SOCKS off while a host and port are still
    stored, so turning it off first blanks both and then disables the state.
    """
    if setup.is_off:
        service = service_name(network)
        return [
            [f"-set{SOCKS_PROXY}state", service, "", ""],
            [f"-set{SOCKS_PROXY}state", service, OFF],
        ]
    return _proxy_commands(SOCKS_PROXY, network, setup)


def _host_list(hosts):
    hosts = host_list(hosts)
    return hosts if hosts else [EMPTY]


def dns_servers_commands(network, hosts):
    """Commands to replace the DNS servers; an empty list clears them."""
    return [["-setdnsservers", service_name(network)] + _host_list(hosts)]


def proxy_bypass_domains_commands(network, hosts):
    """Commands to replace the proxy bypass domains; an empty list clears them."""
    return [["-setproxybypassdomains", service_name(network)] + _host_list(hosts)]
