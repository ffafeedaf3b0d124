'''

'''
import enum

# --- Base Enum Class ---
class ListableEnum(str, enum.Enum):
    """A custom Enum base class that can list all member names."""
    @classmethod
    def get_all_names(cls) -> list[str]:
        return [member.value for member in cls]


class DatabaseProvider(ListableEnum):
    """
    Database backends the connection strings are usually configured for.
    Not enforced: any non-empty provider name is a valid lookup key.
    """
    SQL_SERVER = "SqlServer"
    POSTGRES = "Postgres"
    MARIADB = "MariaDB"
    MYSQL = "MySQL"
