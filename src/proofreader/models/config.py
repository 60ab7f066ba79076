"""Pydantic configuration models for proofreader."""

import json
from importlib import resources
from pathlib import Path
from typing import Any, Literal, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..errors import ConfigurationError


def _as_selector_list(value: Any) -> Any:
    """Accept a single (possibly comma-separated) selector string or a list."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    return value


class SelectorConfig(BaseModel):
    """
    CSS selectors choosing which regions of a document are proofread.

    Each entry may itself be a selector list ("p, li"). Blacklisted
    regions are never proofread, even inside a whitelisted region.
    """

    whitelist: list[str] = Field(..., description="Selectors of regions to scan")
    blacklist: list[str] = Field(default_factory=list, description="Selectors of regions to skip")

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("whitelist", "blacklist", mode="before")
    @classmethod
    def _split(cls, value: Any) -> Any:
        return _as_selector_list(value)

    @field_validator("whitelist", "blacklist")
    @classmethod
    def _strip(cls, value: list[str]) -> list[str]:
        return [s.strip() for s in value if s and s.strip()]

    @field_validator("whitelist")
    @classmethod
    def _non_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("Whitelist has to be set.")
        return value


class DictionaryConfig(BaseModel):
    """Which dictionaries to load."""

    built_in: list[str] = Field(
        default_factory=list,
        alias="build-in",
        description="Names of Hunspell dictionaries (e.g. 'en_US')",
    )
    custom: list[Path] = Field(
        default_factory=list,
        description="Paths to flat word lists, one word per line",
    )
    search_paths: list[Path] = Field(
        default_factory=list,
        description="Extra directories searched for built-in dictionaries",
    )

    model_config = {"extra": "forbid", "populate_by_name": True, "frozen": True}


class StyleSettings(BaseModel):
    """
    Toggles for the style rules.

    Option names follow write-good, so ``{"weasel": false}`` or
    ``{"thereIs": false}`` from an existing settings file work unchanged.
    """

    passive: bool = Field(True, description="Flag passive voice")
    illusion: bool = Field(True, description="Flag repeated words ('the the')")
    so: bool = Field(True, description="Flag 'So' at the start of a sentence")
    there_is: bool = Field(True, alias="thereIs", description="Flag 'There is/are' openers")
    weasel: bool = Field(True, description="Flag weasel words")
    adverb: bool = Field(True, description="Flag adverbs that weaken meaning")
    too_wordy: bool = Field(True, alias="tooWordy", description="Flag wordy phrases")
    cliches: bool = Field(True, description="Flag common cliches")
    eprime: bool = Field(False, description="Flag forms of 'to be'")
    whitelist: list[str] = Field(
        default_factory=list,
        description="Phrases that are never flagged",
    )

    model_config = {"extra": "forbid", "populate_by_name": True, "frozen": True}


class PerformanceConfig(BaseModel):
    """Configuration for performance tuning."""

    max_workers: int = Field(4, ge=1, description="Thread pool workers for per-unit analysis")
    max_suggestions: int = Field(5, ge=0, description="Maximum spelling suggestions per word")

    model_config = {"extra": "forbid", "frozen": True}


class ProofreaderConfig(BaseModel):
    """
    Root configuration model for proofreader.

    Example:
        config = ProofreaderConfig(
            selectors=SelectorConfig(whitelist=["p", "li"], blacklist=["code"]),
            dictionaries=DictionaryConfig(built_in=["en_US"]),
        )

    JSON format (the original settings layout):
        {
          "selectors": {"whitelist": "p, li", "blacklist": "pre, code"},
          "dictionaries": {"build-in": ["en_US"], "custom": []},
          "write-good": {"weasel": false}
        }
    """

    selectors: SelectorConfig
    dictionaries: DictionaryConfig = Field(default_factory=DictionaryConfig)
    style: StyleSettings = Field(default_factory=StyleSettings, alias="write-good")
    performance: PerformanceConfig = Field(default_factory=PerformanceConfig)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "WARNING",
        description="Logging level",
    )

    model_config = {"extra": "forbid", "populate_by_name": True, "frozen": True}

    @classmethod
    def from_dict(cls, data: Any) -> "ProofreaderConfig":
        """Validate a mapping, raising ConfigurationError on failure."""
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration object missing.")
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_json(cls, json_str: str) -> "ProofreaderConfig":
        """Load config from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON configuration: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ProofreaderConfig":
        """Load config from YAML string."""
        import yaml

        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML configuration: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ProofreaderConfig":
        """Load config from a JSON or YAML file, chosen by extension."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

        if path.suffix.lower() in (".yaml", ".yml"):
            config = cls.from_yaml(text)
        else:
            config = cls.from_json(text)

        # Relative custom dictionary paths are relative to the config file
        return config._relative_to(path.parent)

    @classmethod
    def default(cls) -> "ProofreaderConfig":
        """Load the bundled default settings."""
        text = resources.files("proofreader").joinpath("settings.json").read_text(encoding="utf-8")
        return cls.from_json(text)

    def _relative_to(self, base: Path) -> "ProofreaderConfig":
        def resolve(p: Path) -> Path:
            return p if p.is_absolute() else base / p

        dictionaries = self.dictionaries.model_copy(
            update={
                "custom": [resolve(p) for p in self.dictionaries.custom],
                "search_paths": [resolve(p) for p in self.dictionaries.search_paths],
            }
        )
        return self.model_copy(update={"dictionaries": dictionaries})

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", by_alias=True), default_flow_style=False)
