"""
Configuration repository for loading and saving config files.

This module provides the infrastructure layer for configuration persistence.
It handles file I/O operations and basic parsing.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)


def _strip_comments(jsonc_content: str) -> str:
    """Strip // and /* */ comments from JSONC content, leaving string literals intact."""
    out = []
    i = 0
    length = len(jsonc_content)
    in_string = False
    while i < length:
        ch = jsonc_content[i]
        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < length:
                out.append(jsonc_content[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue

        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
        elif jsonc_content.startswith("//", i):
            newline = jsonc_content.find("\n", i)
            i = length if newline == -1 else newline
        elif jsonc_content.startswith("/*", i):
            end = jsonc_content.find("*/", i + 2)
            i = length if end == -1 else end + 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


class ConfigRepository:
    """
    Repository for configuration file operations.

    Handles loading and saving of configuration files with support for
    JSON and JSONC formats.
    """

    def __init__(self, config_dir: Path):
        """
        Initialize the config repository.

        Args:
            config_dir: Base directory for configuration files
        """
        self.config_dir = Path(config_dir)

    def exists(self, filename: str) -> bool:
        """Check whether `filename`.json or `filename`.jsonc is present."""
        return (self.config_dir / f"{filename}.json").exists() or (
            self.config_dir / f"{filename}.jsonc"
        ).exists()

    def load_json_file(self, filename: str, allow_jsonc: bool = True) -> Dict[str, Any]:
        """
        Load a JSON or JSONC file.

        Args:
            filename: Name of the file to load (without extension)
            allow_jsonc: Whether to try JSONC if JSON fails

        Returns:
            Parsed JSON data as dictionary

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file cannot be parsed
        """
        json_path = self.config_dir / f"{filename}.json"
        jsonc_path = self.config_dir / f"{filename}.jsonc"

        if json_path.exists():
            try:
                with open(json_path, 'r', encoding='utf-8') as f:
                    return json.load(f)
            except json.JSONDecodeError as e:
                logger.warning("Failed to parse JSON file %s: %s", json_path, e)
                if not allow_jsonc or not jsonc_path.exists():
                    raise ValueError(f"Invalid JSON in {json_path}: {e}") from e

        if allow_jsonc and jsonc_path.exists():
            try:
                with open(jsonc_path, 'r', encoding='utf-8') as f:
                    return json.loads(_strip_comments(f.read()))
            except json.JSONDecodeError as e:
                logger.error("Failed to parse JSONC file %s: %s", jsonc_path, e)
                raise ValueError(f"Invalid JSONC in {jsonc_path}: {e}") from e

        raise FileNotFoundError(
            f"Config file '{filename}.json' or '{filename}.jsonc' not found in {self.config_dir}"
        )

    def save_json_file(self, filename: str, data: Dict[str, Any]) -> Path:
        """
        Save data to a JSON file, creating the config directory if needed.

        Returns:
            Path of the written file
        """
        self.config_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.config_dir / f"{filename}.json"
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(json.dumps(data, indent=2, ensure_ascii=False))
        logger.debug("Saved config file %s", filepath)
        return filepath
