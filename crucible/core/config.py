"""
Configuration management for crucible searches with Pydantic validation
"""

from typing import Dict, List, Optional, Tuple, Union, Any, Literal
from pathlib import Path
import yaml
from pydantic import BaseModel, Field, field_validator, ConfigDict, ValidationError

from .exceptions import ConfigError
from .grid import Cell, Grid
from .search import DEFAULT_MAX_STRAIGHT
from .state import Heading, SearchState


# ============================================================================
# Pydantic Models for Configuration Validation
# ============================================================================

class OutputConfig(BaseModel):
    """Result export configuration"""
    model_config = ConfigDict(extra='forbid')

    formats: List[Literal['json', 'csv']] = Field(default_factory=list, description="Export formats for sweep results")
    directory: Optional[Path] = Field(None, description="Directory for exported files (defaults to working directory)")


class SearchConfigModel(BaseModel):
    """Root configuration model"""
    model_config = ConfigDict(extra='forbid')

    max_straight: int = Field(DEFAULT_MAX_STRAIGHT, ge=1, description="Longest straight run before a turn is required")
    start: Tuple[int, int] = Field((0, 0), description="Start cell as [row, col]")
    target: Optional[Tuple[int, int]] = Field(None, description="Target cell as [row, col] (defaults to bottom-right)")
    headings: List[Heading] = Field(
        default_factory=lambda: [Heading.EAST, Heading.SOUTH],
        description="Initial headings to search from"
    )
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR'] = 'INFO'

    @field_validator('start', 'target')
    @classmethod
    def validate_cell(cls, v):
        """Cells must have non-negative coordinates"""
        if v is not None and (v[0] < 0 or v[1] < 0):
            raise ValueError(f"Cell coordinates must be non-negative, got {list(v)}")
        return v

    @field_validator('headings', mode='before')
    @classmethod
    def lower_headings(cls, v):
        if isinstance(v, list):
            return [item.lower() if isinstance(item, str) else item for item in v]
        return v

    @field_validator('headings')
    @classmethod
    def normalize_headings(cls, v):
        """Drop duplicate headings, keeping first occurrence order"""
        if not v:
            raise ValueError("At least one initial heading is required")
        return list(dict.fromkeys(v))

    @field_validator('log_level', mode='before')
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


# ============================================================================
# Main Configuration Class
# ============================================================================

class SearchConfig:
    """Configuration class for search parameters with validation"""

    def __init__(self, config_dict: Optional[Dict] = None):
        """Initialize from dictionary (parsed from YAML) with Pydantic validation"""
        try:
            self._model = SearchConfigModel(**(config_dict or {}))
        except ValidationError as e:
            raise ConfigError(f"Configuration validation failed: {str(e)}") from e

        self.max_straight: int = self._model.max_straight
        self.start: Cell = tuple(self._model.start)
        self.target: Optional[Cell] = tuple(self._model.target) if self._model.target else None
        self.headings: List[Heading] = self._model.headings
        self.export_formats: List[str] = self._model.output.formats
        self.output_dir: Path = self._model.output.directory or Path('.')
        self.log_level: str = self._model.log_level

    def resolve_target(self, grid: Grid) -> Cell:
        """Return the configured target, or the grid's bottom-right cell"""
        return self.target if self.target is not None else grid.bottom_right

    def start_states(self) -> List[SearchState]:
        """One start state per configured heading, each with a full budget"""
        row, col = self.start
        return [SearchState(row, col, heading, self.max_straight) for heading in self.headings]

    def with_overrides(self, **overrides: Any) -> 'SearchConfig':
        """Return a new config with non-None overrides applied (used by the CLI)"""
        config_dict = self.to_dict()
        for key, value in overrides.items():
            if value is None:
                continue
            if key in ('formats', 'directory'):
                config_dict['output'][key] = value
            else:
                config_dict[key] = value
        return SearchConfig(config_dict)

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'SearchConfig':
        return cls(config_dict)

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> 'SearchConfig':
        """Load configuration from YAML file with validation"""
        try:
            with open(yaml_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse YAML file: {str(e)}") from e
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read configuration file {yaml_path}: {e}") from e

        if config_dict is not None and not isinstance(config_dict, dict):
            raise ConfigError(f"Configuration file must contain a mapping, got {type(config_dict).__name__}")

        return cls(config_dict)

    def to_dict(self) -> Dict:
        """Convert config back to dictionary"""
        return {
            'max_straight': self.max_straight,
            'start': list(self.start),
            'target': list(self.target) if self.target is not None else None,
            'headings': [heading.value for heading in self.headings],
            'output': {
                'formats': list(self.export_formats),
                'directory': str(self._model.output.directory) if self._model.output.directory else None
            },
            'log_level': self.log_level
        }
