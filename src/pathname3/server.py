from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from pathname3.logging import get_logger
from pathname3.tools import (
    ascend,
    cleanpath,
    compare,
    descend,
    find_paths,
    join,
    list_children,
    path_info,
    read_file,
    relative_path_from,
    stat_path,
)

logger = get_logger(__name__)

mcp = FastMCP("pathname3")


@mcp.tool()
def path_info_tool(path: str) -> dict:
    return path_info(path=path)


@mcp.tool()
def cleanpath_tool(path: str) -> dict:
    return cleanpath(path=path)


@mcp.tool()
def join_tool(path: str, parts: list[str], clean: bool = False) -> dict:
    return join(path=path, parts=parts, clean=clean)


@mcp.tool()
def relative_path_from_tool(path: str, base: str) -> dict:
    return relative_path_from(path=path, base=base)


@mcp.tool()
def ascend_tool(path: str) -> dict:
    return ascend(path=path)


@mcp.tool()
def descend_tool(path: str) -> dict:
    return descend(path=path)


@mcp.tool()
def compare_tool(left: str, right: str) -> dict:
    return compare(left=left, right=right)


@mcp.tool()
def list_children_tool(root: str = ".", path: str = ".") -> dict:
    return list_children(root=root, path=path)


@mcp.tool()
def stat_path_tool(root: str = ".", path: str = ".") -> dict:
    return stat_path(root=root, path=path)


@mcp.tool()
def read_file_tool(path: str, root: str = ".") -> dict:
    return read_file(root=root, path=path)


@mcp.tool()
def find_paths_tool(root: str = ".", path: str = ".", pattern: str | None = None) -> dict:
    return find_paths(root=root, path=path, pattern=pattern)


def main() -> None:
    logger.info("Starting pathname3 MCP server")
    mcp.run()


if __name__ == "__main__":
    main()
