import tomllib
from importlib import metadata
from pathlib import Path


def _get_version() -> str:
    pyproject_path = Path(__file__).parent.parent / "pyproject.toml"

    try:
        with open(pyproject_path, "rb") as f:
            pyproject_data = tomllib.load(f)
        return str(pyproject_data["project"]["version"])
    except (FileNotFoundError, KeyError):
        pass

    try:
        return metadata.version("mirage-sdk")
    except metadata.PackageNotFoundError:
        raise ValueError("Failed to read version from pyproject.toml or package metadata")


SDK_VERSION = _get_version()
