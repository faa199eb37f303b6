"""MCP server for sherlock-indexer."""

import asyncio
import json
import logging
import os
import sys

from mcp.server import Server
from mcp.types import Tool, TextContent

from .parser import ExtractRequest, get_registry
from .tools.extract_symbols import extract_symbols, INTERNAL_ERROR
from .tools.extract_dependencies import extract_dependencies
from .tools.get_chunk_hash import get_chunk_hash
from .tools.get_file_outline import get_file_outline
from .tools.index_folder import index_folder
from .tools.health import health, SERVICE_NAME

logger = logging.getLogger(__name__)


# Create server
server = Server(SERVICE_NAME)


_FILE_PROPERTIES = {
    "repo_path": {
        "type": "string",
        "description": "Path to the repository directory"
    },
    "file_path": {
        "type": "string",
        "description": "Path to the file within the repository (e.g., 'src/main.rs')"
    },
}

_LINE_PROPERTIES = {
    "start_line": {
        "type": "integer",
        "description": "First line of the range, 1-based (default: 1)"
    },
    "end_line": {
        "type": "integer",
        "description": "Last line of the range, 1-based and inclusive (default: last line)"
    },
}


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return [
        Tool(
            name="health",
            description="Report service status and version.",
            inputSchema={
                "type": "object",
                "properties": {}
            }
        ),
        Tool(
            name="extract_symbols",
            description="Extract functions, classes, methods, types and other declarations from a source file, with line ranges, signatures and export status.",
            inputSchema={
                "type": "object",
                "properties": {**_FILE_PROPERTIES, **_LINE_PROPERTIES},
                "required": ["repo_path", "file_path"]
            }
        ),
        Tool(
            name="extract_dependencies",
            description="Extract dependencies from a source file. Not implemented yet: always returns an empty list.",
            inputSchema={
                "type": "object",
                "properties": {**_FILE_PROPERTIES, **_LINE_PROPERTIES},
                "required": ["repo_path", "file_path"]
            }
        ),
        Tool(
            name="get_chunk_hash",
            description="Hash a line range of a file for change detection. Identical content at identical bounds always yields the same hash.",
            inputSchema={
                "type": "object",
                "properties": {**_FILE_PROPERTIES, **_LINE_PROPERTIES},
                "required": ["repo_path", "file_path"]
            }
        ),
        Tool(
            name="get_file_outline",
            description="Get the symbols of a source file nested by containment (methods under their classes).",
            inputSchema={
                "type": "object",
                "properties": dict(_FILE_PROPERTIES),
                "required": ["repo_path", "file_path"]
            }
        ),
        Tool(
            name="index_folder",
            description="Extract symbols from every supported source file in a local folder. Files that fail are skipped with a warning.",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Path to local folder (absolute or relative, supports ~ for home directory)"
                    },
                    "max_files": {
                        "type": "integer",
                        "description": "Maximum number of files to index",
                        "default": 500
                    }
                },
                "required": ["path"]
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    repos_root = os.environ.get("SHERLOCK_REPOS_ROOT")

    try:
        if name == "health":
            result = health()
        elif name == "extract_symbols":
            result = await asyncio.to_thread(
                extract_symbols,
                repo_path=arguments["repo_path"],
                file_path=arguments["file_path"],
                request=ExtractRequest.from_arguments(arguments),
                repos_root=repos_root
            )
        elif name == "extract_dependencies":
            result = extract_dependencies(
                repo_path=arguments["repo_path"],
                file_path=arguments["file_path"],
                request=ExtractRequest.from_arguments(arguments),
                repos_root=repos_root
            )
        elif name == "get_chunk_hash":
            result = await asyncio.to_thread(
                get_chunk_hash,
                repo_path=arguments["repo_path"],
                file_path=arguments["file_path"],
                request=ExtractRequest.from_arguments(arguments),
                repos_root=repos_root
            )
        elif name == "get_file_outline":
            result = await asyncio.to_thread(
                get_file_outline,
                repo_path=arguments["repo_path"],
                file_path=arguments["file_path"],
                repos_root=repos_root
            )
        elif name == "index_folder":
            result = await asyncio.to_thread(
                index_folder,
                path=arguments["path"],
                max_files=arguments.get("max_files", 500)
            )
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception:
        logger.exception("Tool %s failed", name)
        return [TextContent(type="text", text=json.dumps({"success": False, "error": INTERNAL_ERROR}, indent=2))]


async def run_server():
    """Run the MCP server."""
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Main entry point."""
    # stdout carries the MCP stream
    logging.basicConfig(
        stream=sys.stderr,
        level=os.environ.get("SHERLOCK_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Load grammars before serving any request
    registry = get_registry()
    logger.info("%s listening on stdio (%s)", SERVICE_NAME, ", ".join(registry.languages))

    asyncio.run(run_server())


if __name__ == "__main__":
    main()
