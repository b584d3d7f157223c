"""
Configuration parameters for the Othello front end.
"""
import os
import json
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional

@dataclass
class DisplayConfig:
    """Configuration for the text renderer."""
    empty_symbol: str = '.'
    black_symbol: str = '●'
    white_symbol: str = '○'
    hint_symbol: str = '*'
    highlight_moves: bool = True

    def symbols(self) -> Dict[int, str]:
        """Map cell values to their symbols."""
        return {0: self.empty_symbol, 1: self.black_symbol, 2: self.white_symbol}

@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_level: str = "WARNING"
    log_file: Optional[str] = None

@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello'),
            display=DisplayConfig(**config_dict.get('display', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r', encoding='utf-8') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
