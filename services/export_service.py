"""Export helpers for downloading a formatted transcript as a file."""
import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

EXPORT_FORMATS = {
    "markdown": ("md", "text/markdown; charset=utf-8"),
    "txt": ("txt", "text/plain; charset=utf-8"),
}

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


@dataclass
class ExportFile:
    """A rendered export ready to be sent as an attachment."""
    filename: str
    media_type: str
    content: str


def build_export(
    content: str,
    export_format: str,
    file_name: str = "transcript",
    today: Optional[date] = None
) -> ExportFile:
    """
    Build an export named ``<file_name>-<YYYY-MM-DD>.<ext>``.

    Args:
        content: Text to export
        export_format: "markdown" or "txt"
        file_name: Base file name; unsafe characters are replaced with "-"
        today: Date stamp to use (defaults to today)

    Raises:
        ValueError: If export_format is not supported
    """
    if export_format not in EXPORT_FORMATS:
        raise ValueError(
            f"Unsupported export format: {export_format}. "
            f"Allowed formats: {', '.join(EXPORT_FORMATS)}"
        )

    extension, media_type = EXPORT_FORMATS[export_format]
    base_name = _UNSAFE_FILENAME_CHARS.sub("-", file_name).strip("-.") or "transcript"
    stamp = (today or date.today()).isoformat()

    return ExportFile(
        filename=f"{base_name}-{stamp}.{extension}",
        media_type=media_type,
        content=content
    )
