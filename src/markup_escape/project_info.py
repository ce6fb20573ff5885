"""Project information utilities."""

from pathlib import Path
import tomllib

from pydantic import BaseModel

_UNAVAILABLE_DESCRIPTION = "Project description not available"
_UNAVAILABLE_VERSION = "Version not available"


class ProjectInfo(BaseModel):
    """Project information from pyproject.toml."""

    name: str
    description: str
    version: str


def get_project_info() -> ProjectInfo:
    """Get project information from pyproject.toml file.

    Returns:
        ProjectInfo: A Pydantic model containing name, description and version.

    """
    # src/markup_escape/project_info.py -> project root
    project_root = Path(__file__).parent.parent.parent
    pyproject_path = project_root / "pyproject.toml"

    if not pyproject_path.exists():
        return ProjectInfo(
            name="markup-escape",
            description=_UNAVAILABLE_DESCRIPTION,
            version=_UNAVAILABLE_VERSION,
        )

    try:
        with pyproject_path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        return ProjectInfo(
            name="markup-escape",
            description=f"Error reading project info: {e}",
            version=_UNAVAILABLE_VERSION,
        )

    project = config.get("project", {})
    return ProjectInfo(
        name=project.get("name", "markup-escape"),
        description=project.get("description", _UNAVAILABLE_DESCRIPTION),
        version=project.get("version", _UNAVAILABLE_VERSION),
    )
