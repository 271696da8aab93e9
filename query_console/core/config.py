from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Engine used by the "sql" backend
    DATABASE_URL: str = "sqlite+aiosqlite:///./console.db"

    # Which query-execution backend the console talks to: "sql" or "http"
    BACKEND: Literal["sql", "http"] = "sql"
    BACKEND_URL: str = "http://localhost:8080/execute_query"
    BACKEND_TIMEOUT: float = 30.0

    # Reserved introspection query used to fill the schema sidebar
    SCHEMA_QUERY: str = "SHOW TABLES"
    LOAD_SCHEMA_ON_STARTUP: bool = True

    # Reject replies whose second line does not look like a separator
    STRICT_SEPARATOR: bool = False

    # This tells Pydantic to read from the .env file
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


# Create a single instance of the settings to use everywhere
settings = Settings()
