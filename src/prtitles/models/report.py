"""Per-run extraction report."""

from pydantic import BaseModel, Field

from .file import FileInfo
from .title import ExtractionResult


class ProjectReport(BaseModel):
    """Everything learned about one project file during a run."""

    file_info: FileInfo
    result: ExtractionResult = Field(default_factory=ExtractionResult)
    output_paths: list[str] = Field(default_factory=list)

    @property
    def filename(self) -> str:
        return self.file_info.filename

    @property
    def title_count(self) -> int:
        return self.result.count

    @property
    def warning_count(self) -> int:
        return len(self.result.warnings)
