# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the logic of the Transparence Politique server:
# argument schemas, the HTTP client for the remote API, and the renderers
# that turn JSON documents into Markdown reports.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any orchestration
#   framework.  The MCP layer (tools/) wraps these capabilities; the agent
#   layer (agent/) only talks to tools over MCP.
#
#   Every renderer here is a pure function: the same document always gives
#   the same text.  The only I/O in the package is core/api.py.
# =============================================================================
