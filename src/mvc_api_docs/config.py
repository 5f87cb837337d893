"""Documentation configuration.

Values come from ``APIDOC_*`` environment variables or a ``.env`` file and
end up on every controller documentation container.
"""

from typing import TYPE_CHECKING

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mvc_api_docs.model.base import ControllerDocumentation

if TYPE_CHECKING:
    from mvc_api_docs.reader.resource import ResourceDescriptor

DEFAULT_API_VERSION = "1.0"
DEFAULT_SWAGGER_VERSION = "1.1"


class DocumentationConfiguration(BaseSettings):
    """Settings shared by all documentation generated for one application."""

    model_config = SettingsConfigDict(
        env_prefix="APIDOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_version: str = Field(default=DEFAULT_API_VERSION)
    swagger_version: str = Field(default=DEFAULT_SWAGGER_VERSION)
    base_path: str = Field(default="/")
    log_level: str = Field(default="WARNING")

    # Document the built-in documentation controller alongside the application
    include_internal_resources: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {sorted(valid_levels)}")
        return upper

    def new_documentation(self, resource: "ResourceDescriptor") -> ControllerDocumentation:
        """Build an empty documentation container for ``resource``."""
        return ControllerDocumentation(
            api_version=self.api_version,
            swagger_version=self.swagger_version,
            base_path=self.base_path,
            resource_path=resource.get_controller_uri(),
        )
