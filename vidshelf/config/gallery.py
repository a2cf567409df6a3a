"""Video loader configuration.

Options are fixed at construction time. The camelCase option names used
by host pages (``videoEndpoint``, ``errorRetries`` ...) are accepted as
aliases of the snake_case fields.
"""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from vidshelf.core.exceptions import ConfigValidationError

ThumbnailQuality = Literal["default", "mqdefault", "hqdefault", "sddefault", "maxresdefault"]


class LoaderConfig(BaseModel):
    """VideoLoader configuration.

    Attributes:
        video_endpoint: URL or path of the catalog JSON document
        thumbnail_quality: img.youtube.com quality tier for derived thumbnails
        player_page: URL or path of the external player page
        error_retries: Retries after the initial attempt before giving up
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    video_endpoint: str = Field(default="videos.json", alias="videoEndpoint")
    thumbnail_quality: ThumbnailQuality = Field(default="mqdefault", alias="thumbnailQuality")
    player_page: str = Field(default="video-player.html", alias="playerPage")
    error_retries: int = Field(default=3, ge=0, alias="errorRetries")

    @model_validator(mode="before")
    @classmethod
    def drop_empty_strings(cls, data: Any) -> Any:
        """Treat empty-string options as missing so they take defaults."""
        if isinstance(data, Mapping):
            return {k: v for k, v in data.items() if not (isinstance(v, str) and v == "")}
        return data

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> "LoaderConfig":
        """Build config from a loose option mapping.

        Args:
            options: Option bag; unknown keys are ignored

        Returns:
            Validated LoaderConfig

        Raises:
            ConfigValidationError: If a recognized option has an invalid value
        """
        try:
            return cls.model_validate(dict(options or {}))
        except ValidationError as e:
            raise ConfigValidationError(
                "Invalid video loader options",
                errors=[{"loc": err["loc"], "msg": err["msg"]} for err in e.errors()],
            ) from e


__all__ = ["LoaderConfig", "ThumbnailQuality"]
