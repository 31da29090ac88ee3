from .db_connection import ConnectionFactory, SqlConnectionFactory
from .db_manage import DbManageService

__all__ = ["ConnectionFactory", "DbManageService", "SqlConnectionFactory"]
