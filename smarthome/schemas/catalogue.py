"""
Catalogue Schemas
=================

Pydantic models validating a catalogue configuration document::

    {
        "models": {
            "TemperatureSensor": {"implementation": "TemperatureSensor", "functionality": "Temperature"}
        },
        "functionalities": {"Temperature": true}
    }
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CatalogueEntrySchema(BaseModel):
    """One model of the catalogue."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    implementation: str = Field(..., min_length=1, description="Implementation identifier within the registry namespace")
    functionality: str = Field(..., min_length=1, description="Functionality the model provides")

    @field_validator("implementation", "functionality")
    @classmethod
    def _strip(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class CatalogueConfigSchema(BaseModel):
    """Model table plus the optional functionality switch table."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    models: dict[str, CatalogueEntrySchema] = Field(default_factory=dict, description="Model name to implementation")
    functionalities: dict[str, bool] | None = Field(
        default=None,
        description="Functionality name to enabled flag; absent means every functionality is enabled",
    )

    @field_validator("models")
    @classmethod
    def _non_blank_models(cls, v: dict[str, CatalogueEntrySchema]) -> dict[str, CatalogueEntrySchema]:
        for model in v:
            if not model.strip():
                raise ValueError("model names must not be blank")
        return v
