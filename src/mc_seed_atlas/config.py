"""Runtime configuration for MC Seed Atlas."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mc_seed_atlas.models import AnalysisOptions, StructureKind


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="MC_SEED_ATLAS_", env_file=".env", extra="ignore")

    app_name: str = "mc-seed-atlas"
    log_level: str = "WARNING"
    search_radius_chunks: int = Field(
        default=50,
        ge=0,
        description="Chunk radius around spawn searched for structures.",
    )
    structure_kinds: str = Field(
        default="all",
        description="Comma separated structure kinds to predict, or 'all'.",
    )
    export_path: str | None = Field(
        default=None,
        description="Default JSON Lines file for exported coordinate records.",
    )
    telemetry_enabled: bool = True

    @field_validator("structure_kinds")
    @classmethod
    def _known_kinds(cls, value: str) -> str:
        parse_structure_kinds(value)
        return value

    def analysis_options(self) -> AnalysisOptions:
        return AnalysisOptions(
            search_radius_chunks=self.search_radius_chunks,
            structure_kinds=parse_structure_kinds(self.structure_kinds),
        )


def parse_structure_kinds(value: str) -> frozenset[StructureKind] | None:
    """Parse ``"village,trial_chamber"`` style lists; ``"all"`` or blank means every kind."""
    names = [item.strip().lower() for item in value.split(",") if item.strip()]
    if not names or "all" in names:
        return None
    return frozenset(StructureKind(name) for name in names)


settings = Settings()
