"""
Conversion result tracking.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class FileConversion:
    """Statistics of one converted input file."""
    input_file: str
    output_file: str
    element_count: int = 0
    statement_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input_file": self.input_file,
            "output_file": self.output_file,
            "element_count": self.element_count,
            "statement_count": self.statement_count,
        }


@dataclass
class ConversionResult:
    """
    Results of a CSV to RDF conversion run.

    Tracks the converted files, the number of elements and statements, and
    what the URI post transformation changed.
    """
    files: List[FileConversion] = field(default_factory=list)
    transformation_count: int = 0
    rewritten_statement_count: int = 0
    unresolved_resources: int = 0
    warnings: List[str] = field(default_factory=list)

    @property
    def element_count(self) -> int:
        return sum(f.element_count for f in self.files)

    @property
    def statement_count(self) -> int:
        return sum(f.statement_count for f in self.files)

    def get_summary(self) -> str:
        """Generate human-readable summary of conversion results."""
        lines = [
            "Conversion Summary:",
            f"  ✓ Files: {len(self.files)}",
            f"  ✓ Elements: {self.element_count}",
            f"  ✓ Statements: {self.statement_count}",
        ]

        if self.transformation_count:
            lines.append(f"  ✓ URI Post Transformations: {self.transformation_count}")
            lines.append(f"      - rewritten statements: {self.rewritten_statement_count}")

        if self.unresolved_resources:
            lines.append(f"  ⚠ Resources without replacement value: {self.unresolved_resources}")

        if self.warnings:
            lines.append(f"  ⚠ Warnings: {len(self.warnings)}")
            for warning in self.warnings[:3]:
                lines.append(f"      - {warning}")
            if len(self.warnings) > 3:
                lines.append(f"      ... and {len(self.warnings) - 3} more")

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize conversion result to dictionary."""
        return {
            "files": [f.to_dict() for f in self.files],
            "element_count": self.element_count,
            "statement_count": self.statement_count,
            "transformation_count": self.transformation_count,
            "rewritten_statement_count": self.rewritten_statement_count,
            "unresolved_resources": self.unresolved_resources,
            "warnings": self.warnings,
        }
