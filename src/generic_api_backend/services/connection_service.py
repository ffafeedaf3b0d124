'''
Connection string resolution.
Reads the selected "DatabaseProvider" and hands back the matching entry of the
"ConnectionStrings" section, so data-access code never touches configuration keys.
'''
from typing import Optional

from ..common.config import settings
from ..common.exceptions import ConfigurationError, InvalidArgumentError
from ..common.logger import log
from ..models.enums import DatabaseProvider
from .abstractions import ConfigurationSource
from .configuration import SettingsConfigurationSource


class ConnectionStringResolver:
    """
    Resolves the connection string for the configured database provider.
    """
    PROVIDER_KEY = "DatabaseProvider"
    CONNECTION_STRINGS_SECTION = "ConnectionStrings"
    DEFAULT_PROVIDER = DatabaseProvider.SQL_SERVER.value

    def __init__(self, config: ConfigurationSource):
        if config is None:
            raise InvalidArgumentError(
                "Configuration source cannot be None. Check how the resolver is constructed."
            )
        self.config = config

    @property
    def current_provider(self) -> str:
        """
        The provider named by "DatabaseProvider", trimmed.
        Falls back to "SqlServer" when the key is missing or blank.
        """
        value = self.config.get_value(self.PROVIDER_KEY)
        if value is None or not value.strip():
            log.warning(f"'{self.PROVIDER_KEY}' is not set. Defaulting to '{self.DEFAULT_PROVIDER}'.")
            return self.DEFAULT_PROVIDER

        provider = value.strip()
        if provider not in DatabaseProvider.get_all_names():
            log.warning(f"Unrecognised database provider '{provider}'. Using it as-is.")
        return provider

    def resolve_connection_string(self) -> str:
        """
        Returns the connection string configured for the current provider, unmodified.
        Raises ConfigurationError naming the missing key when there is none.
        """
        provider = self.current_provider
        connection_string = self.config.get_section_value(self.CONNECTION_STRINGS_SECTION, provider)

        if connection_string is None or not connection_string.strip():
            key = f"{self.CONNECTION_STRINGS_SECTION}:{provider}"
            log.error(f"No connection string configured for provider '{provider}' ({key}).")
            raise ConfigurationError(
                f"No connection string found for provider '{provider}'. "
                f"Check that '{key}' exists in the configuration "
                f"and that '{self.PROVIDER_KEY}' is set correctly.",
                section=self.CONNECTION_STRINGS_SECTION,
                name=provider,
            )

        log.info(f"Resolved connection string for provider '{provider}'.")
        return connection_string


def get_connection_provider(source: Optional[ConfigurationSource] = None) -> ConnectionStringResolver:
    """
    Builds a resolver over `source`, or over the application settings when no
    source is given.
    """
    if source is None:
        source = SettingsConfigurationSource(settings)
    return ConnectionStringResolver(source)
