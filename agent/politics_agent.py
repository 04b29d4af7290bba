# =============================================================================
# agent/politics_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the ADK agent that answers questions about French politics.
#
#   ┌──────────────────────────────────────────────┐
#   │               Google ADK Agent               │
#   │  prompt.py ──▶ LiteLlm model ──▶ MCPToolset  │
#   └──────────────────────────────────────────────┘
#                                         │ stdio
#                                         ▼
#                           ┌──────────────────────────┐
#                           │ tools/mcp_server.py      │
#                           │ 11 read-only tools       │
#                           └──────────────────────────┘
#                                         │ HTTPS
#                                         ▼
#                           politic-tracker.vercel.app
#
# MODEL:
#   Any LiteLLM model string.  AGENT_MODEL overrides the default
#   "openrouter/openai/gpt-4o"; LiteLLM reads OPENROUTER_API_KEY itself.
# =============================================================================

import os
import sys
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_politics_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def server_parameters() -> StdioServerParameters:
    """How ADK spawns the MCP server.

    "uv run" makes the subprocess use the project's .venv, so fastmcp and
    core/ are importable.  The server is started as a module from the
    project root so that `core` resolves.
    """
    return StdioServerParameters(
        command="uv",
        args=["run", "python", "-m", "tools.mcp_server"],
        cwd=PROJECT_ROOT,
        # TRANSPARENCE_* variables from .env reach the server through the
        # inherited environment.
        env=dict(os.environ),
    )


def create_agent(model: Optional[str] = None) -> Agent:
    """Create the politics assistant agent.

    Args:
        model: LiteLLM model string.  Falls back to $AGENT_MODEL, then to
               DEFAULT_MODEL.

    Returns:
        A configured Google ADK Agent instance.
    """
    model = model or os.environ.get("AGENT_MODEL") or DEFAULT_MODEL
    print(f"   model: {model}", file=sys.stderr)

    mcp_tools = MCPToolset(connection_params=server_parameters())

    return Agent(
        name="transparence_politique_assistant",
        model=LiteLlm(model=model),
        instruction=get_politics_assistant_prompt(),
        tools=[mcp_tools],
    )
