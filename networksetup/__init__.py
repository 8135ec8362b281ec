"""
networksetup - Python binding for the macOS networksetup utility.

Builds argument lists for /usr/sbin/networksetup and runs it to configure
proxies, DNS servers and proxy bypass domains per network service.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .exceptions import NetworkSetupError, LaunchError
from .models import Network, Config, Address
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

__all__ = [
    # Errors
    "NetworkSetupError",
    "LaunchError",
    # Model
    "Network",
    "Config",
    "Address",
    # Operations
    "set_auto_proxy_discovery",
    "set_auto_proxy",
    "set_ftp_proxy",
    "set_web_proxy",
    "set_secure_web_proxy",
    "set_socks_proxy",
    "set_dns_servers",
    "set_proxy_bypass_domains",
]
