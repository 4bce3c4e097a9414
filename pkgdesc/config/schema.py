"""Configuration schema for generators, validated with Pydantic.

Configuration errors are caught when the config is loaded, not halfway
through a generation run.
"""

from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, field_validator

SUPPORTED_FORMATS = ("json", "graphml")


class GeneratorConfig(BaseModel):
    """Configuration for the manifest generator.

    Attributes:
        output_dir: Root directory receiving one sub-directory per package.
        formats: Output formats to emit, in emission order.
        clean_output: Whether to clear a package's output directory before
            generating into it.
    """

    output_dir: Path = Path("target")
    formats: List[str] = Field(default_factory=lambda: ["json"])
    clean_output: bool = True

    model_config = {"extra": "forbid"}

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, v: List[str]) -> List[str]:
        """Validate output formats and drop duplicates, keeping order."""
        if not v:
            raise ValueError("formats must contain at least one format")
        result: List[str] = []
        for fmt in v:
            fmt = fmt.lower()
            if fmt not in SUPPORTED_FORMATS:
                raise ValueError(
                    f"Invalid format '{fmt}'. Valid formats: {SUPPORTED_FORMATS}"
                )
            if fmt not in result:
                result.append(fmt)
        return result

    @classmethod
    def default(cls) -> "GeneratorConfig":
        return cls()
