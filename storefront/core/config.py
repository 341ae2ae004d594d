"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional
from urllib.parse import quote_plus

from pydantic import AliasChoices, BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False


class CloudinarySettings(BaseModel):
    cloud_name: str = ""
    api_key: str = ""
    api_secret: str = Field(default="", repr=False)
    timeout: float = 30.0


class CatalogSettings(BaseModel):
    root_folder: str = "Radha"
    root_category: str = "All"
    page_size: int = Field(default=500, ge=1, le=500)
    scan_page_size: int = Field(default=100, ge=1, le=500)
    folder_depth: int = Field(default=1, ge=1)
    max_concurrency: int = Field(default=4, ge=1)


class DatabaseSettings(BaseModel):
    """Either a full ``url`` or discrete connection parameters."""

    url: Optional[str] = None
    driver: str = "sqlite+aiosqlite"
    user: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)
    host: Optional[str] = None
    port: Optional[int] = None
    name: str = "./storefront.db"
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None

    def build_url(self) -> str:
        if self.url:
            return self.url
        if self.host is None:
            return f"{self.driver}:///{self.name}"
        credentials = ""
        if self.user:
            credentials = quote_plus(self.user)
            if self.password:
                credentials += f":{quote_plus(self.password)}"
            credentials += "@"
        port = f":{self.port}" if self.port else ""
        return f"{self.driver}://{credentials}{self.host}{port}/{self.name}"


class SecuritySettings(BaseModel):
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)


class OrderSettings(BaseModel):
    backend: Literal["memory", "database"] = "memory"
    guest_user_id: str = "guest"


class LoggingSettings(BaseModel):
    level: str = "INFO"
    file: Optional[Path] = None


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    debug: bool = False
    project_name: str = "Storefront Catalog Service"
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    server: ServerSettings = ServerSettings()
    cloudinary: CloudinarySettings = CloudinarySettings()
    catalog: CatalogSettings = CatalogSettings()
    database: DatabaseSettings = DatabaseSettings()
    orders: OrderSettings = OrderSettings()
    security: SecuritySettings = SecuritySettings()
    logging: LoggingSettings = LoggingSettings()

    # flat names used by existing deployments; nested variables win when both are set
    legacy_port: Optional[int] = Field(default=None, validation_alias=AliasChoices("PORT"), exclude=True)
    legacy_cloud_name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("CLOUDINARY_CLOUD_NAME"), exclude=True
    )
    legacy_api_key: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("CLOUDINARY_API_KEY"), exclude=True
    )
    legacy_api_secret: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("CLOUDINARY_API_SECRET"), exclude=True, repr=False
    )

    @model_validator(mode="after")
    def _apply_legacy_names(self) -> "Settings":
        if self.legacy_port is not None and "port" not in self.server.model_fields_set:
            self.server = self.server.model_copy(update={"port": self.legacy_port})

        cloudinary_updates = {
            name: value
            for name, value in (
                ("cloud_name", self.legacy_cloud_name),
                ("api_key", self.legacy_api_key),
                ("api_secret", self.legacy_api_secret),
            )
            if value is not None and name not in self.cloudinary.model_fields_set
        }
        if cloudinary_updates:
            self.cloudinary = self.cloudinary.model_copy(update=cloudinary_updates)
        return self

    @property
    def database_url(self) -> str:
        return self.database.build_url()

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port


@lru_cache()
def get_settings() -> Settings:
    return Settings()
