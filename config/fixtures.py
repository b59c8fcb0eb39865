"""
Test Data Loader

Loads fixture data (users, products) from JSON or YAML files.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

# Default test data directory
TEST_DATA_DIR = Path(__file__).resolve().parent.parent / "test_data"

FIXTURE_SUFFIXES = (".json", ".yaml", ".yml")


@dataclass(frozen=True)
class Credentials:
    """A username/password pair from the users fixture."""

    username: str
    password: str

    @classmethod
    def from_dict(cls, data: Dict) -> "Credentials":
        return cls(username=data["username"], password=data["password"])


def _resolve(name: str, directory: Path) -> Path:
    path = directory / name
    if path.suffix in FIXTURE_SUFFIXES:
        if path.exists():
            return path
    else:
        for suffix in FIXTURE_SUFFIXES:
            candidate = directory / f"{name}{suffix}"
            if candidate.exists():
                return candidate
    raise FileNotFoundError(f"Fixture not found: {name} in {directory}")


def load_fixture(name: str, directory: Optional[Union[str, Path]] = None) -> Any:
    """
    Load a fixture by name.

    Args:
        name: File name, with or without extension ('users', 'users.json')
        directory: Fixture directory (defaults to test_data/)

    Returns:
        Parsed file content

    Raises:
        FileNotFoundError if no matching file exists
    """
    dir_path = Path(directory) if directory else TEST_DATA_DIR
    path = _resolve(name, dir_path)
    logger.debug(f"Loading fixture {path}")

    with open(path) as f:
        if path.suffix in (".yaml", ".yml"):
            return yaml.safe_load(f)
        return json.load(f)


def load_users(directory: Optional[Union[str, Path]] = None) -> Dict[str, Credentials]:
    """Load the users fixture keyed by role (validUser, lockedOutUser, ...)."""
    data = load_fixture("users", directory)
    return {role: Credentials.from_dict(entry) for role, entry in data.items()}
