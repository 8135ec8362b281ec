"""
Value types passed to the networksetup operations.

Network selects the network service a setting applies to, Config carries
the off / on / set-value state of a setting and Address describes a proxy
endpoint. None of them hold state beyond a single call.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar, Generic, Iterable, List, Optional, Tuple, TypeVar, Union

from .config import ON

T = TypeVar("T")


@dataclass(frozen=True)
class Network:
    """A network service as named in System Settings (e.g. "Wi-Fi")."""

    name: str

    ETHERNET: ClassVar["Network"]
    WIFI: ClassVar["Network"]
    BLUETOOTH_PAN: ClassVar["Network"]
    THUNDERBOLT_BRIDGE: ClassVar["Network"]

    @classmethod
    def named(cls, name: str) -> "Network":
        """Select a custom or renamed service; the name is passed through as is."""
        return cls(name)

    def as_str(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


Network.ETHERNET = Network("Ethernet")
Network.WIFI = Network("Wi-Fi")
Network.BLUETOOTH_PAN = Network("Bluetooth PAN")
Network.THUNDERBOLT_BRIDGE = Network("Thunderbolt Bridge")


def service_name(network: Union[Network, str]) -> str:
    """Return the service name argument for a Network or a plain string."""
    if isinstance(network, Network):
        return network.as_str()
    return str(network)


def host_list(hosts: Union[str, Iterable[str]]) -> List[str]:
    """Return hosts as a list of strings; a single string is one host."""
    if isinstance(hosts, str):
        return [hosts]
    return [str(h) for h in hosts]


class State(Enum):
    """The three states a setting can be put in."""

    OFF = "off"
    ON = "on"
    VALUE = "value"


@dataclass(frozen=True)
class Config(Generic[T]):
    """
    Desired state of a setting.

    Config.off() disables the setting, Config.on() enables it with the value
    networksetup already has stored, and Config.set(value) stores a new value.
    """

    state: State
    value: Optional[T] = None

    def __post_init__(self):
        # Accepts "off"/"on"/"value" as well; anything else raises ValueError
        object.__setattr__(self, "state", State(self.state))
        if self.state is State.VALUE and self.value is None:
            raise ValueError("Config.set() needs a value")
        if self.state is not State.VALUE and self.value is not None:
            raise ValueError(f"Config in state '{self.state.value}' takes no value")

    @classmethod
    def off(cls) -> "Config[T]":
        return cls(State.OFF)

    @classmethod
    def on(cls) -> "Config[T]":
        return cls(State.ON)

    @classmethod
    def set(cls, value: T) -> "Config[T]":
        return cls(State.VALUE, value)

    @property
    def is_off(self) -> bool:
        return self.state is State.OFF

    @property
    def is_on(self) -> bool:
        return self.state is State.ON

    @property
    def is_value(self) -> bool:
        return self.state is State.VALUE


@dataclass(frozen=True)
class Address:
    """Proxy endpoint: host, port and optional (username, password)."""

    host: str
    port: Union[str, int]
    credentials: Optional[Tuple[str, str]] = None

    def auth(self, username: str, password: str) -> "Address":
        """Return a copy of this address carrying credentials."""
        return replace(self, credentials=(username, password))

    def as_args(self) -> List[str]:
        """Host and port arguments, followed by the auth triple when credentials are set."""
        args = [self.host, str(self.port)]
        if self.credentials is not None:
            username, password = self.credentials
            args.extend([ON, username, password])
        return args
