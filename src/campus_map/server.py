"""MCP server for campus-map.

Registers all tools and runs via stdio transport.
"""

from mcp.server.fastmcp import FastMCP

from .tools.data import register_data_tools
from .tools.lookup import register_lookup_tools
from .tools.routing import register_routing_tools
from .tools.status import register_status_tools

mcp = FastMCP(
    "campus-map",
    instructions="Look up campus buildings and route between locations over the campus road graph",
)

# Register all tool groups
register_data_tools(mcp)
register_lookup_tools(mcp)
register_routing_tools(mcp)
register_status_tools(mcp)


def main():
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
