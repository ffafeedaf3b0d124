'''
Contracts the connection services depend on.
Anything with these methods can be passed in; no inheritance required.
'''
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class ConfigurationSource(Protocol):
    """
    Read-only key/value configuration, addressable by flat key
    ("DatabaseProvider") or by section + name ("ConnectionStrings", "Postgres").
    Missing keys read as None.
    """
    def get_value(self, key: str) -> Optional[str]: ...

    def get_section_value(self, section: str, name: str) -> Optional[str]: ...


@runtime_checkable
class ConnectionProvider(Protocol):
    """
    What data-access code needs to open a connection: the selected provider
    name and its connection string.
    """
    @property
    def current_provider(self) -> str: ...

    def resolve_connection_string(self) -> str: ...
