import pytest

from hilo.adapters import CLIAdapter
from hilo.adapters.cli import parse_bet
from hilo.common.io_interface import LoggingIOInterface, TestIOInterface
from hilo.engine import HigherLowerEngine
from hilo.higher_lower.state import Guess

STATE = {
    "chips": 3,
    "cards_remaining": 40,
    "current_card": "7 of ♥",
    "current_rank": 7,
    "last_drawn_card": "7 of ♥",
    "last_outcome": "win",
    "last_delta": 2,
    "message": "Nice call.",
    "game_over": False,
}


@pytest.fixture
def io():
    return TestIOInterface()


@pytest.fixture
def adapter(io):
    return CLIAdapter(io)


@pytest.mark.asyncio
async def test_request_decision(adapter, io):
    io.add_input("h", "2")
    assert await adapter.request_player_decision(STATE) == (Guess.HIGHER, 2)
    assert io.prompts[-1] == "Bet (1-3): "


@pytest.mark.asyncio
async def test_invalid_guess_is_asked_again(adapter, io):
    io.add_input("sideways", "LOWER", "1")
    assert await adapter.request_player_decision(STATE) == (Guess.LOWER, 1)
    assert "Invalid choice. Please type h or l." in io.sent_messages


@pytest.mark.asyncio
async def test_bets_are_passed_through_unvalidated(adapter, io):
    io.add_input("l", "2.5")
    assert await adapter.request_player_decision(STATE) == (Guess.LOWER, 2.5)


@pytest.mark.asyncio
@pytest.mark.parametrize("responses", [["q"], ["h", "quit"], []])
async def test_quit_or_end_of_input(adapter, io, responses):
    io.add_input(*responses)
    assert await adapter.request_player_decision(STATE) is None


@pytest.mark.asyncio
async def test_render_game_state(adapter, io):
    await adapter.render_game_state(STATE)

    assert "Chips: 3    Cards left: 40" in io.sent_messages
    assert "Drawn: 7 of ♥ (win, +2)" in io.sent_messages
    assert "Showing: 7 of ♥" in io.sent_messages
    assert "Nice call." in io.sent_messages


@pytest.mark.asyncio
async def test_round_event_message(adapter, io):
    await adapter.notify_game_event(
        "ROUND_ENDED",
        {
            "guess": "higher",
            "previous_card": "7 of ♣",
            "drawn_card": "7 of ♦",
            "outcome": "loss",
            "tie": True,
        },
    )
    assert io.sent_messages == ["You called higher on 7 of ♣ and drew 7 of ♦: tie"]


@pytest.mark.asyncio
async def test_unknown_events_are_quiet(adapter, io):
    await adapter.notify_game_event("CARD_DEALT", {"card": "2 of ♠"})
    assert io.sent_messages == []


@pytest.mark.asyncio
async def test_confirm(adapter, io):
    io.add_input("Y", "nope")
    assert await adapter.confirm("Again? ") is True
    assert await adapter.confirm("Again? ") is False
    assert await adapter.confirm("Again? ") is False


@pytest.mark.asyncio
async def test_full_game_over_console(io):
    io.add_input(*(["h", "1"] * 3))
    engine = HigherLowerEngine(CLIAdapter(io), {"seed": 3})
    await engine.initialize()

    result = await engine.play_game()
    await engine.shutdown()

    assert result["rounds_played"] <= 3
    assert any(message.startswith("Chips:") for message in io.sent_messages)


@pytest.mark.asyncio
async def test_transcript_is_written(tmp_path):
    path = tmp_path / "game.log"
    inner = TestIOInterface()
    inner.add_input("l", "1")
    adapter = CLIAdapter(LoggingIOInterface(str(path), inner=inner))

    await adapter.render_game_state(STATE)
    decision = await adapter.request_player_decision(STATE)
    await adapter.shutdown()

    assert decision == (Guess.LOWER, 1)
    transcript = path.read_text(encoding="utf-8")
    assert "Showing: 7 of ♥" in transcript
    assert "Bet (1-3): 1" in transcript
    assert "Showing: 7 of ♥" in inner.sent_messages


@pytest.mark.parametrize(
    "text, expected", [("3", 3), (" 2 ", 2), ("2.5", 2.5), ("lots", "lots")]
)
def test_parse_bet(text, expected):
    assert parse_bet(text) == expected
