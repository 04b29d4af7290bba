# =============================================================================
# main.py  —  Interactive demo of the Transparence Politique assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Creates the ADK agent (agent/politics_agent.py), which spawns the MCP
#      server (tools/mcp_server.py) as a subprocess
#   2. Opens an in-memory session
#   3. Loops: reads a question, streams the agent's events, prints the
#      tool calls and the final answer
#
# The MCP server alone (no agent) is started with `transparence-mcp` or
# `python -m tools.mcp_server`.
# =============================================================================

import asyncio

from dotenv import load_dotenv

# LiteLlm reads OPENROUTER_API_KEY when the model is created.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.politics_agent import create_agent

APP_NAME = "transparence_politique"
USER_ID = "demo_user"


QUIT_WORDS = ("quit", "exit", "q")


async def ask(runner, session_id: str, question: str, on_tool=None) -> str:
    """Send one question and return the agent's last text part.

    `on_tool` is called with the name of every tool the agent invokes.
    """
    message = types.Content(role="user", parts=[types.Part(text=question)])
    answer = ""
    async for event in runner.run_async(
        user_id=USER_ID, session_id=session_id, new_message=message
    ):
        for part in (event.content.parts if event.content else None) or []:
            if part.text:
                answer = part.text
            if part.function_call and on_tool:
                on_tool(part.function_call.name)
    return answer


async def run_agent():
    """Run the assistant interactively until the user quits."""
    print("🔧 Transparence Politique : initialisation de l'agent...")
    session_service = InMemorySessionService()
    runner = Runner(agent=create_agent(), app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)
    print("💬 Questions sur un élu, une affaire, un vote, une loi ou une élection ('quit' pour sortir).")

    while True:
        try:
            question = input("\n🧑 Vous : ").strip()
        except (EOFError, KeyboardInterrupt):
            break
        if question.lower() in QUIT_WORDS:
            break
        if not question:
            continue

        answer = await ask(
            runner, session.id, question,
            on_tool=lambda name: print(f"  🔧 Outil : {name}"),
        )
        print(f"\n🤖 {answer}" if answer else "\n⚠️  Aucune réponse générée.")

    print("\n👋 Au revoir !")


if __name__ == "__main__":
    asyncio.run(run_agent())
