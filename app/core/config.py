# Defines application-wide settings using pydantic-settings' BaseSettings
# Manages environment variables for the service:
# API metadata (project name, version)
# Database connection details (Cloud SQL style socket or a full DATABASE_URL)
# Server binding and CORS policy


import json
from typing import Annotated, List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from sqlalchemy.engine import URL
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "Blog Backend API"
    VERSION: str = "0.1.0"

    # Database
    # DATABASE_URL wins when set; otherwise the MySQL URL is assembled from DB_*
    DATABASE_URL: Optional[str] = None
    DB_USER: str = ""
    DB_PASSWORD: str = ""
    DB_NAME: str = ""
    DB_HOST: str = ""  # unix socket directory, e.g. /cloudsql/project:region:instance
    SQL_ECHO: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = ["*"]
    CORS_ALLOW_METHODS: List[str] = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
    CORS_ALLOW_HEADERS: List[str] = ["Origin", "Content-Type", "Accept", "Authorization"]

    # Development settings
    DEBUG: bool = False
    ENVIRONMENT: str = "production"

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, str):
            # Handle JSON string format
            try:
                return json.loads(v)
            except ValueError:
                return []
        return v

    @property
    def database_url(self) -> Union[str, URL]:
        if self.DATABASE_URL:
            return self.DATABASE_URL

        query = {}
        host = None
        if self.DB_HOST.startswith("/"):
            query["unix_socket"] = self.DB_HOST
        elif self.DB_HOST:
            host = self.DB_HOST

        return URL.create(
            "mysql+pymysql",
            username=self.DB_USER or None,
            password=self.DB_PASSWORD or None,
            host=host,
            database=self.DB_NAME or None,
            query=query,
        )

# Create settings instance
settings = Settings()
