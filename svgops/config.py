"""
svgops Configuration

Settings for a compile run. Values come from defaults, an optional JSON
config file, then command line flags, later sources winning.
"""

import json
from dataclasses import dataclass, fields, replace
from typing import Any, Dict

OUTPUT_FORMATS = ("python", "json")


@dataclass
class CompilerSettings:
    """Settings for compiling a batch of SVG files."""
    output: str = "svg_images.py"      # Output file path
    output_format: str = "python"      # "python" or "json"
    symbol_prefix: str = "Image_"      # Prefix of generated image names
    jobs: int = 1                      # Worker processes; 1 compiles in-process
    verbose: bool = False

    def validate(self) -> tuple[bool, str]:
        """
        Check the settings.

        Returns:
            (is_valid, error_message)
        """
        if self.output_format not in OUTPUT_FORMATS:
            return False, f"Unknown output format {self.output_format!r} (expected one of {', '.join(OUTPUT_FORMATS)})"
        if self.jobs < 1:
            return False, f"jobs must be at least 1, got {self.jobs}"
        if not self.output:
            return False, "No output file given"
        return True, ""

    def merged(self, overrides: Dict[str, Any]) -> 'CompilerSettings':
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def settings_from_dict(data: Dict[str, Any]) -> CompilerSettings:
    known = {f.name for f in fields(CompilerSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown settings: {', '.join(unknown)}")
    return CompilerSettings(**data)


def load_settings(filepath: str) -> CompilerSettings:
    """Load settings from a JSON file whose keys match CompilerSettings fields."""
    with open(filepath, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a JSON object: {filepath}")
    return settings_from_dict(data)
