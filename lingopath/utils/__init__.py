"""LingoPath utilities."""

from .yaml_loader import load_content_file, get_available_content

__all__ = [
    "load_content_file",
    "get_available_content",
]
