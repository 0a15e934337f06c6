"""Project detection for a working directory."""

from pathlib import Path


def identify(path: str | Path) -> str:
    """Detect which package manager a project directory uses.

    Args:
        path: The project directory

    Returns:
        Detected project kind: 'yarn', 'node', or 'unknown'
    """
    directory = Path(path)

    # Lockfile takes precedence
    if (directory / "yarn.lock").is_file():
        return "yarn"

    if (directory / "package.json").is_file():
        return "node"

    return "unknown"
