"""
YAML content loader for LingoPath.

Loads curriculum content files from the content/ directory.
"""

from pathlib import Path
from typing import Any
import yaml

from lingopath.config import get_content_dir


def load_content_file(name: str, content_dir: Path | None = None) -> dict[str, Any]:
    """
    Load a content file by name.

    Args:
        name: File name without .yaml extension (e.g., "lessons")
        content_dir: Optional custom content directory

    Returns:
        Dict containing the parsed YAML document

    Raises:
        FileNotFoundError: If content file doesn't exist
        ValueError: If the document is not a mapping
        yaml.YAMLError: If YAML parsing fails
    """
    dir_path = Path(content_dir) if content_dir else get_content_dir()
    file_path = dir_path / f"{name}.yaml"

    if not file_path.exists():
        raise FileNotFoundError(f"Content file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        document = yaml.safe_load(f)

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ValueError(f"Content file must contain a mapping at top level: {file_path}")
    return document


def get_available_content(content_dir: Path | None = None) -> list[str]:
    """
    List all available content files.

    Args:
        content_dir: Optional custom content directory

    Returns:
        Sorted list of content names (without .yaml extension)
    """
    dir_path = Path(content_dir) if content_dir else get_content_dir()
    if not dir_path.exists():
        return []
    return sorted(p.stem for p in dir_path.glob("*.yaml"))
