"""Language registry with LanguageSpec rule tables for all supported languages."""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LanguageSpec:
    """Rules for turning a language's syntax nodes into symbols."""
    # tree-sitter language name (for tree-sitter-language-pack)
    ts_language: str

    # Node types that represent extractable symbols
    # Maps node_type -> symbol type
    symbol_node_types: dict[str, str]

    # Export strategy
    # "visibility_modifier" = Rust (first child is `pub`)
    # "uppercase_name" = Go (capitalised identifiers)
    # "always" = Java (treated as public regardless of modifiers)
    # "never" = everything else
    export_strategy: str

    # Visibility strategy
    # "from_export" = "public" when exported, else "private"
    # "public" = always "public"
    # "none" = no visibility reported
    visibility_strategy: str

    # Whether a signature that fails to decode aborts the request
    # (True) or is dropped from the symbol (False)
    strict_signature: bool

    # Child field holding the symbol name
    name_field: str = "name"


# File extension to language mapping (extensions are matched lowercased)
LANGUAGE_EXTENSIONS = {
    ".rs": "rust",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".tsx": "tsx",
    ".go": "go",
    ".py": "python",
    ".java": "java",
    ".cpp": "cpp",
    ".cc": "cpp",
    ".cxx": "cpp",
    ".c": "cpp",
    ".h": "cpp",
    ".hpp": "cpp",
}


def detect_language(file_path: str) -> Optional[str]:
    """Map a file path to a language identifier by its extension.

    Returns None for missing or unrecognised extensions.
    """
    ext = os.path.splitext(file_path)[1].lower()
    if not ext:
        return None
    return LANGUAGE_EXTENSIONS.get(ext)


# Rust rules
RUST_SPEC = LanguageSpec(
    ts_language="rust",
    symbol_node_types={
        "function_item": "function",
        "impl_item": "impl",
        "struct_item": "struct",
        "enum_item": "enum",
        "trait_item": "trait",
        "type_item": "type",
        "const_item": "const",
        "static_item": "static",
    },
    export_strategy="visibility_modifier",
    visibility_strategy="from_export",
    strict_signature=False,
)


_JS_SYMBOL_NODE_TYPES = {
    "function_declaration": "function",
    "function": "function",
    "function_expression": "function",
    "method_definition": "method",
    "class_declaration": "class",
    "variable_declaration": "variable",
}


# JavaScript rules
JAVASCRIPT_SPEC = LanguageSpec(
    ts_language="javascript",
    symbol_node_types=_JS_SYMBOL_NODE_TYPES,
    export_strategy="never",
    visibility_strategy="none",
    strict_signature=False,
)


# TypeScript rules (JavaScript node types, TypeScript grammar)
TYPESCRIPT_SPEC = LanguageSpec(
    ts_language="typescript",
    symbol_node_types=_JS_SYMBOL_NODE_TYPES,
    export_strategy="never",
    visibility_strategy="none",
    strict_signature=False,
)


# TSX rules
TSX_SPEC = LanguageSpec(
    ts_language="tsx",
    symbol_node_types=_JS_SYMBOL_NODE_TYPES,
    export_strategy="never",
    visibility_strategy="none",
    strict_signature=False,
)


# Go rules
GO_SPEC = LanguageSpec(
    ts_language="go",
    symbol_node_types={
        "function_declaration": "function",
        "method_declaration": "method",
        "type_declaration": "type",
    },
    export_strategy="uppercase_name",
    visibility_strategy="none",
    strict_signature=False,
)


# Python rules
PYTHON_SPEC = LanguageSpec(
    ts_language="python",
    symbol_node_types={
        "function_definition": "function",
        "class_definition": "class",
    },
    export_strategy="never",
    visibility_strategy="none",
    strict_signature=True,
)


# Java rules
JAVA_SPEC = LanguageSpec(
    ts_language="java",
    symbol_node_types={
        "class_declaration": "class",
        "interface_declaration": "interface",
        "method_declaration": "method",
    },
    export_strategy="always",
    visibility_strategy="public",
    strict_signature=False,
)


# C/C++ rules
CPP_SPEC = LanguageSpec(
    ts_language="cpp",
    symbol_node_types={
        "function_definition": "function",
        "class_specifier": "class",
        "namespace_definition": "namespace",
    },
    export_strategy="never",
    visibility_strategy="none",
    strict_signature=True,
)


# Language registry
LANGUAGE_REGISTRY = {
    "rust": RUST_SPEC,
    "javascript": JAVASCRIPT_SPEC,
    "typescript": TYPESCRIPT_SPEC,
    "tsx": TSX_SPEC,
    "go": GO_SPEC,
    "python": PYTHON_SPEC,
    "java": JAVA_SPEC,
    "cpp": CPP_SPEC,
}
