'''
Configuration sources that satisfy the ConfigurationSource contract.
1- MappingConfigurationSource: already-parsed nested settings (e.g. a loaded JSON document)
2- SettingsConfigurationSource: the pydantic Settings object (env vars + .env)
'''
import re
from typing import Any, Mapping, Optional

from ..common.config import Settings
from ..common.exceptions import InvalidArgumentError

KEY_DELIMITER = ":"


def _find_key(mapping: Mapping[str, Any], key: str) -> Any:
    """Case-insensitive lookup of one key in a mapping. Returns None when absent."""
    if key in mapping:
        return mapping[key]
    wanted = key.casefold()
    for candidate, value in mapping.items():
        if str(candidate).casefold() == wanted:
            return value
    return None


class MappingConfigurationSource:
    """
    Reads values out of a nested mapping.
    Flat keys may address nested values with ':' ("ConnectionStrings:Postgres").
    """
    def __init__(self, data: Mapping[str, Any]):
        if data is None:
            raise InvalidArgumentError("Configuration data cannot be None.")
        self._data = data

    def get_value(self, key: str) -> Optional[str]:
        node: Any = self._data
        for part in key.split(KEY_DELIMITER):
            if not isinstance(node, Mapping):
                return None
            node = _find_key(node, part)
            if node is None:
                return None

        # sections are not values
        if isinstance(node, Mapping):
            return None
        return str(node)

    def get_section_value(self, section: str, name: str) -> Optional[str]:
        return self.get_value(f"{section}{KEY_DELIMITER}{name}")


class SettingsConfigurationSource:
    """
    Exposes a Settings instance through configuration-style keys.
    "DatabaseProvider" reads DATABASE_PROVIDER, and the "ConnectionStrings"
    section reads the CONNECTION_STRINGS dict.
    """
    def __init__(self, settings: Settings):
        if settings is None:
            raise InvalidArgumentError("Settings cannot be None.")
        self._settings = settings

    @staticmethod
    def to_field_name(key: str) -> str:
        """'DatabaseProvider' -> 'DATABASE_PROVIDER'"""
        return re.sub(r'(?<=[a-z0-9])(?=[A-Z])', '_', key).upper()

    def get_value(self, key: str) -> Optional[str]:
        value = getattr(self._settings, self.to_field_name(key), None)
        if value is None or isinstance(value, Mapping):
            return None
        return str(value)

    def get_section_value(self, section: str, name: str) -> Optional[str]:
        values = getattr(self._settings, self.to_field_name(section), None)
        if not isinstance(values, Mapping):
            return None
        value = _find_key(values, name)
        return None if value is None else str(value)
