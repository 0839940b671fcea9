import json
from pathlib import Path
from typing import Any


def write_to_file(content: list[Any] | dict[str, Any] | str, filepath: str) -> None:
    """Writes content to a file in appropriate format.

    Args:
        content: Data to write (list or dict as JSON, string as-is)
        filepath: Output file path

    Raises:
        TypeError: If content is not a supported type
        OSError: If file cannot be written
    """
    if not isinstance(content, (list, dict, str)):
        raise TypeError(f"Unsupported content type: {type(content)}")

    try:
        with open(filepath, "w", encoding="utf-8") as f:
            if isinstance(content, str):
                f.write(content)
                if not content.endswith("\n"):
                    f.write("\n")
            else:
                json.dump(content, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise OSError(f"Failed to write to file {filepath}: {e}") from e


def read_json_file(filepath: str) -> Any:
    """Read JSON content from a file and return parsed data.

    Args:
        filepath: Path to JSON file.

    Returns:
        Parsed JSON object (list/dict).

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read or is not valid JSON.
    """
    p = Path(filepath)
    if not p.exists():
        raise FileNotFoundError(f"JSON file not found: {filepath}")
    try:
        with p.open("r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise OSError(f"Failed to read JSON from {filepath}: {e}") from e
