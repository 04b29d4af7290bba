# =============================================================================
# tools/__init__.py
# =============================================================================
# MCP surface of the project.
#
# ARCHITECTURAL ROLE:
#   tools/ sits between the agent framework and core/.  mcp_server.py:
#     1. Declares one FastMCP tool per capability in core/registry.py
#     2. Gives each tool a typed signature (the schema the agent sees)
#     3. Forwards the call to Capability.invoke() and returns its text
#     4. Logs every call to stderr
#
# WHAT TOOLS DO NOT DO:
#   - No rendering or request building (core/ does that)
#   - No error translation (FastMCP reports raised errors to the agent)
#   - No knowledge of Google ADK
# =============================================================================
