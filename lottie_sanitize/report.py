"""Size summary for a sanitize run."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from .io import dump_json, write_json


def format_kb(n_bytes: int) -> str:
    return f"{n_bytes / 1024:.2f} KB"


@dataclass
class SizeReport:
    input_path: Path
    output_path: Path
    original_bytes: int
    fixed_bytes: int
    fields_fixed: int = 0

    @property
    def saved_bytes(self) -> int:
        return self.original_bytes - self.fixed_bytes

    def as_dict(self) -> Dict[str, Any]:
        return {
            "input": self.input_path.as_posix(),
            "output": self.output_path.as_posix(),
            "fields_fixed": self.fields_fixed,
            "original_kb": round(self.original_bytes / 1024, 2),
            "fixed_kb": round(self.fixed_bytes / 1024, 2),
            "saved_kb": round(self.saved_bytes / 1024, 2),
        }


def write_report(path: Path, report: SizeReport) -> None:
    if path.suffix.lower() == ".md":
        raise ValueError(f"Report path {path} clashes with its Markdown copy")
    data = report.as_dict()
    write_json(path, dump_json(data, indent=2))
    write_report_md(path.with_suffix(".md"), data)


def write_report_md(path: Path, data: dict) -> None:
    lines = ["# Lottie Sanitize Report", ""]
    if not data:
        lines.append("No files processed.")
    else:
        for key, value in data.items():
            lines.append(f"- **{key.replace('_', ' ').title()}**: {value}")
    write_json(path, "\n".join(lines) + "\n")
