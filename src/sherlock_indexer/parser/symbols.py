"""CodeSymbol dataclass and utility functions."""

from dataclasses import asdict, dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CodeSymbol:
    """A declaration extracted from a syntax tree node."""
    id: str                         # "{file_path}_{symbol_name}_{row}"
    symbol_name: str                # Identifier as written (e.g., "login")
    symbol_type: str                # Language vocabulary: "function" | "struct" | "namespace" | ...
    file_path: str                  # Path used for the request
    line_start: int                 # Start line (1-indexed, inclusive)
    line_end: int                   # End line (1-indexed, inclusive)
    signature: Optional[str] = None     # First source line of the declaration
    dependencies: list[str] = field(default_factory=list)  # Always empty for now
    exported: bool = False
    visibility: Optional[str] = None    # "public" | "private" | None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ExtractRequest:
    """Optional line bounds sent with a request.

    Only the chunk hash uses them; symbol and dependency extraction
    accept and ignore them.
    """
    start_line: Optional[int] = None
    end_line: Optional[int] = None

    @classmethod
    def from_arguments(cls, arguments: dict) -> "ExtractRequest":
        return cls(
            start_line=arguments.get("start_line"),
            end_line=arguments.get("end_line"),
        )


def make_symbol_id(file_path: str, symbol_name: str, row: int) -> str:
    """Generate a symbol ID.

    Format: {file_path}_{symbol_name}_{row}, where row is the 0-based
    start row. Two symbols with the same name starting on the same row
    share an ID.
    Example: src/lib.rs_parse_41
    """
    return f"{file_path}_{symbol_name}_{row}"


def build_symbol(
    node,
    name: str,
    symbol_type: str,
    file_path: str,
    signature: Optional[str],
    exported: bool,
    visibility: Optional[str],
) -> CodeSymbol:
    """Assemble a CodeSymbol from a matched node and its extracted fields."""
    start_row = node.start_point[0]
    return CodeSymbol(
        id=make_symbol_id(file_path, name, start_row),
        symbol_name=name,
        symbol_type=symbol_type,
        file_path=file_path,
        line_start=start_row + 1,
        line_end=node.end_point[0] + 1,
        signature=signature,
        exported=exported,
        visibility=visibility,
    )
