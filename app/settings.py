# app/settings.py
from __future__ import annotations
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings

from backend.backends import Backend, KeyValueBackend, KeyValueParams, RelationalBackend, RelationalParams


class Settings(BaseSettings):
    # ----- runtime -----
    LOG_LEVEL: str = Field(default="INFO", alias="LOG_LEVEL")

    # ----- DynamoDB (set the table name to switch backends) -----
    YELB_DDB_RESTAURANTS: Optional[str] = Field(default=None, alias="YELB_DDB_RESTAURANTS")
    AWS_REGION: Optional[str] = Field(default=None, alias="AWS_REGION")

    # ----- Postgres -----
    YELB_DB_SERVER_ENDPOINT: str = Field(default="postgres", alias="YELB_DB_SERVER_ENDPOINT")
    YELB_DB_SERVER_PORT: int = Field(default=5432, alias="YELB_DB_SERVER_PORT")
    YELB_DB_NAME: str = Field(default="yelb", alias="YELB_DB_NAME")
    YELB_DB_USERNAME: str = Field(default="postgres", alias="YELB_DB_USERNAME")
    YELB_DB_PASSWORD: str = Field(default="", alias="YELB_DB_PASSWORD")
    YELB_DB_SSLMODE: str = Field(default="verify-full", alias="YELB_DB_SSLMODE")
    YELB_DB_SSLROOTCERT: Optional[str] = Field(default=None, alias="YELB_DB_SSLROOTCERT")
    YELB_DB_CONNECT_TIMEOUT: int = Field(default=10, alias="YELB_DB_CONNECT_TIMEOUT")

    # pydantic-settings v2 config
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
        "populate_by_name": True,
    }

    # ----- Helpers -----
    @property
    def ddb_table(self) -> str:
        """Blank table names count as unset."""
        return (self.YELB_DDB_RESTAURANTS or "").strip()

    def backend(self) -> Backend:
        """Pick the count backend once: a DynamoDB table name wins, else Postgres."""
        if self.ddb_table:
            return KeyValueBackend(
                KeyValueParams(table_name=self.ddb_table, region=(self.AWS_REGION or "").strip())
            )
        return RelationalBackend(
            RelationalParams(
                host=self.YELB_DB_SERVER_ENDPOINT,
                port=self.YELB_DB_SERVER_PORT,
                dbname=self.YELB_DB_NAME,
                user=self.YELB_DB_USERNAME,
                password=self.YELB_DB_PASSWORD,
                sslmode=self.YELB_DB_SSLMODE,
                sslrootcert=self.YELB_DB_SSLROOTCERT,
                connect_timeout=self.YELB_DB_CONNECT_TIMEOUT,
            )
        )


settings = Settings()
