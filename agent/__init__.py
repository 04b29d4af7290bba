# =============================================================================
# agent/__init__.py
# =============================================================================
# Demo Google ADK agent that answers questions about French public life by
# calling the Transparence Politique MCP server.
#
# ARCHITECTURAL ROLE:
#   - prompt.py           system prompt (date + available tools)
#   - politics_agent.py   Agent + LiteLlm model + MCPToolset over stdio
#
#   The agent holds no data logic.  It picks tools, reads their Markdown
#   reports and answers the user.
# =============================================================================
