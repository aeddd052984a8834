"""Configuration file discovery."""

from pathlib import Path


CONFIG_FILE_NAMES = (".hookpoint.toml", "hookpoint.toml")


def find_toml_config_file(search_dir: Path | None = None) -> Path | None:
    """Find the first hookpoint TOML file in ``search_dir`` (default: cwd).

    Files are checked in this order:
    1. .hookpoint.toml
    2. hookpoint.toml
    """
    base = search_dir or Path.cwd()
    for name in CONFIG_FILE_NAMES:
        candidate = base / name
        if candidate.is_file():
            return candidate
    return None
