"""Process-wide settings model."""

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """User preferences shared by all projects.

    ``vat`` is a percentage. When it is unset or zero, VAT is disabled and
    the project form does not offer the VAT field at all.
    """

    vat: float | None = Field(default=None, ge=0)
    currency: str = "CHF"
    locale: str = "en"

    @property
    def vat_enabled(self) -> bool:
        return bool(self.vat)
