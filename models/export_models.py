"""Request model for exporting a formatted transcript as a file."""
from pydantic import BaseModel, ConfigDict, Field


class ExportRequest(BaseModel):
    """
    Request body for POST /api/export.

    Attributes:
        content: Text to export
        format: "markdown" or "txt" (validated by the export service)
        file_name: Base file name; the date and extension are appended
    """
    model_config = ConfigDict(populate_by_name=True)

    content: str = Field(..., description="Text to export")
    format: str = Field(default="markdown", description="Export format: markdown or txt")
    file_name: str = Field(default="transcript", alias="fileName")
