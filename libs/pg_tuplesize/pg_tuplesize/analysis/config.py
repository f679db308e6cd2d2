"""Configurations for tuple layout, tables and database connection"""
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

def _escape_postgres_identifier(name: str) -> str:
    return name.replace('"', '""')

#### Tuple Layout Config
class TupleLayoutConfig(BaseModel):
    """Constants of the heap tuple model used by the estimator."""

    header_size: int = Field(
        23,
        ge=0,
        description="Fixed tuple header size in bytes"
    )

    primary_key: str = Field(
        default="id",
        description="Column excluded from the summed column sizes"
    )

    @field_validator('primary_key')
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("primary_key cannot be empty")
        return v

#### Table Config
class TableConfig(BaseModel):
    """Table whose storage is reported."""

    table_name: str = Field(
        ...,
        description="The database table name"
    )

    schema_name: str = Field(
        default="public",
        description="The schema name"
    )

    @field_validator('table_name', 'schema_name')
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Validate that string fields are not empty."""
        if not v or not v.strip():
            raise ValueError("Field cannot be empty")
        return v

    @property
    def escaped_table_name(self):
        return _escape_postgres_identifier(self.table_name)

    @property
    def escaped_schema_name(self):
        return _escape_postgres_identifier(self.schema_name)

    @property
    def qualified_name(self) -> str:
        return f'"{self.escaped_schema_name}"."{self.escaped_table_name}"'

#### Database Settings
class DatabaseSettings(BaseSettings):
    """Connection settings read from POSTGRES_* environment variables or .env"""
    model_config = SettingsConfigDict(
        env_prefix="POSTGRES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    user: str = "postgres"
    password: str = ""
    host: str = "localhost"
    port: int = 5432
    db: str = "postgres"
    driver: str = "postgresql+psycopg"

    @property
    def url(self) -> URL:
        return URL.create(
            drivername=self.driver,
            username=self.user,
            password=self.password or None,
            host=self.host,
            port=self.port,
            database=self.db,
        )
