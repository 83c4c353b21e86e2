from dataclasses import dataclass, field


@dataclass
class ValidationState:
    """Result threaded through each check and consumed by the final report."""

    patch_version: str
    failure_status: bool = False
    error_count: int = 0
    error_lines: list[str] = field(default_factory=list)
    last_line: str | None = None
