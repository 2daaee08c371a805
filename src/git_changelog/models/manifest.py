"""Project manifest model."""

from typing import Optional

from pydantic import BaseModel, field_validator


class Manifest(BaseModel):
    """Version and homepage metadata declared by the project."""

    version: str
    homepage: Optional[str] = None

    @field_validator("version")
    @classmethod
    def _strip_version(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("version must not be empty")
        return value

    @field_validator("homepage")
    @classmethod
    def _blank_homepage_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()
