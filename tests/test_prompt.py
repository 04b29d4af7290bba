"""System prompt of the demo agent."""

from datetime import date

from agent.prompt import get_politics_assistant_prompt
from core.registry import capability_names


def test_prompt_carries_the_given_date():
    prompt = get_politics_assistant_prompt(date(2027, 4, 11))
    assert "DATE DU JOUR : 2027-04-11" in prompt


def test_prompt_lists_every_tool():
    prompt = get_politics_assistant_prompt()
    for name in capability_names():
        assert f"• {name} :" in prompt


def test_prompt_defaults_to_today():
    assert date.today().isoformat() in get_politics_assistant_prompt()
