"""Build symbol tree hierarchy for file outlines."""

from dataclasses import dataclass, field

from .symbols import CodeSymbol


@dataclass
class SymbolNode:
    """A node in the symbol tree with children."""
    symbol: CodeSymbol
    children: list["SymbolNode"] = field(default_factory=list)


def _contains(outer: tuple[int, int], inner: tuple[int, int]) -> bool:
    return outer[0] <= inner[0] < outer[1] and inner[1] <= outer[1]


def build_symbol_tree(
    symbols: list[CodeSymbol], spans: list[tuple[int, int]]
) -> list[SymbolNode]:
    """Build a hierarchical tree from a flat, pre-order symbol list.

    spans holds each symbol's (start_byte, end_byte), as collected by
    extract_symbols. A symbol becomes a child of the closest preceding
    symbol whose byte range encloses it; line ranges cannot separate
    siblings that share a line.
    Returns top-level symbols.
    """
    roots = []
    stack: list[tuple[SymbolNode, tuple[int, int]]] = []

    for symbol, span in zip(symbols, spans):
        node = SymbolNode(symbol=symbol)

        while stack and not _contains(stack[-1][1], span):
            stack.pop()

        if stack:
            stack[-1][0].children.append(node)
        else:
            roots.append(node)
        stack.append((node, span))

    return roots


def flatten_tree(nodes: list[SymbolNode], depth: int = 0) -> list[tuple[CodeSymbol, int]]:
    """Flatten symbol tree with depth information.

    Returns list of (symbol, depth) tuples for indentation.
    """
    result = []
    for node in nodes:
        result.append((node.symbol, depth))
        result.extend(flatten_tree(node.children, depth + 1))
    return result
