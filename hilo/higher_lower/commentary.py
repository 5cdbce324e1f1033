"""
Dealer commentary for the higher/lower game.

The round resolver asks for a line of flavor text after every transition. The
text is chosen by outcome category and never feeds back into game state, so
any callable with the signature of `select_commentary` can stand in for it.
"""

import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, List, Optional


class CommentaryOutcome(Enum):
    """Top-level commentary categories."""

    START = auto()
    WIN = auto()
    LOSS = auto()
    GAME_OVER = auto()


class CommentaryReason(Enum):
    """Why a game ended, from the commentator's point of view."""

    CHIPS = auto()
    DECK = auto()
    HIGH_SCORE = auto()


@dataclass(frozen=True)
class CommentaryContext:
    """
    Everything the commentator may use to pick a line.

    Attributes:
        outcome: Category of the event being commented on
        bet: Size of the bet for win and loss rounds
        chips: Player's chips after the event
        tie: Whether a loss came from equal ranks
        reason: Why the game ended, for GAME_OVER
    """

    outcome: CommentaryOutcome
    bet: Optional[int] = None
    chips: Optional[int] = None
    tie: bool = False
    reason: Optional[CommentaryReason] = None

    @classmethod
    def start(cls) -> "CommentaryContext":
        return cls(CommentaryOutcome.START)

    @classmethod
    def win(cls, bet: int, chips: int) -> "CommentaryContext":
        return cls(CommentaryOutcome.WIN, bet=bet, chips=chips)

    @classmethod
    def loss(cls, bet: int, chips: int, tie: bool = False) -> "CommentaryContext":
        return cls(CommentaryOutcome.LOSS, bet=bet, chips=chips, tie=tie)

    @classmethod
    def game_over(
        cls, reason: CommentaryReason, chips: Optional[int] = None
    ) -> "CommentaryContext":
        return cls(CommentaryOutcome.GAME_OVER, chips=chips, reason=reason)


Commentator = Callable[[CommentaryContext], str]

START_LINES = [
    "Welcome to the table. Call HIGHER or LOWER on the next card. Right pays your bet, wrong or equal pays me. You start with 3 chips.",
    "Sit down, sit down. You have 3 chips. Guess whether the next card beats this one. Ties go to the house.",
    "Fresh deck, fresh victim. HIGHER or LOWER, bet what you like up to your stack. Matching ranks count as a loss.",
    "Three chips, one deck, and me. Guess right and I pay your bet. Guess wrong or hit a tie and it's mine.",
    "Rules are short: pick a direction, place a bet, watch the card. Ties are losses. Try to make those 3 chips last.",
]

WIN_LINES: Dict[str, List[str]] = {
    "small": [
        "One chip. Try not to spend it all at once.",
        "A whole chip. I'll alert the newspapers.",
        "You won. Barely, but you won.",
        "Fine, take your chip. I wasn't looking anyway.",
    ],
    "medium": [
        "Two chips. Lucky, not good.",
        "Okay, that one was decent. Don't get comfortable.",
        "Two up. I've seen worse guessing. Not much worse.",
        "Nice call. Do it again and I might be impressed.",
    ],
    "large": [
        "{bet} chips?! Alright, that one stung.",
        "Big bet, big payout. Enjoy it while it lasts.",
        "{bet} chips to you. I was distracted, that's all.",
        "Bold. Paid off, too. Don't let it go to your head.",
    ],
}

LOSS_LINES: Dict[str, List[str]] = {
    "tie": [
        "Same rank. Ties go to the house, remember?",
        "Matching cards! My favourite kind of win.",
        "A tie is a loss. I wrote that rule myself.",
        "So close. Equal still counts for me.",
    ],
    "small": [
        "One chip lighter. Happens to the best of you.",
        "I'll take that chip, thanks.",
        "Wrong way. The chip is mine now.",
        "Minus one. Plenty more where that came from. For me.",
    ],
    "medium": [
        "Two chips gone. That has to sting.",
        "Wrong call, two chips down.",
        "Two chips closer to zero. I'm enjoying this.",
        "Risky bet, predictable result.",
    ],
    "large": [
        "{bet} chips gone. That'll leave a mark.",
        "Went big on {bet} and lost. Classic.",
        "{bet} chips straight into my pile.",
        "Bold move betting {bet}. Terrible outcome.",
    ],
}

GAME_OVER_LINES: Dict[CommentaryReason, List[str]] = {
    CommentaryReason.CHIPS: [
        "Out of chips. Better luck next time.",
        "Broke already? That was quick.",
        "Zero chips. Thanks for the donation.",
        "All gone. Deal another game if you dare.",
    ],
    CommentaryReason.DECK: [
        "Out of cards! You walk away with {chips} chips.",
        "Deck's empty. Final count: {chips} chips.",
        "That's every card. {chips} chips survived. Respectable.",
        "No more cards. You finished on {chips}. Not bad for a human.",
    ],
    CommentaryReason.HIGH_SCORE: [
        "🏆 New high score: {chips} chips! Don't let it go to your head.",
        "🏆 {chips} chips, a new record. I'm pretending not to be impressed.",
        "🏆 Best run yet with {chips} chips. Frame it.",
    ],
}


def _bet_bucket(bet: Optional[int]) -> str:
    if bet is None or bet <= 1:
        return "small"
    if bet == 2:
        return "medium"
    return "large"


def lines_for(context: CommentaryContext) -> List[str]:
    """
    Candidate lines for a context, before placeholders are filled.

    Args:
        context: The event being commented on

    Returns:
        Non-empty list of template strings
    """
    if context.outcome == CommentaryOutcome.START:
        return START_LINES
    if context.outcome == CommentaryOutcome.WIN:
        return WIN_LINES[_bet_bucket(context.bet)]
    if context.outcome == CommentaryOutcome.LOSS:
        if context.tie:
            return LOSS_LINES["tie"]
        return LOSS_LINES[_bet_bucket(context.bet)]
    return GAME_OVER_LINES[context.reason or CommentaryReason.CHIPS]


def select_commentary(
    context: CommentaryContext, rng: Optional[random.Random] = None
) -> str:
    """
    Pick a dealer line for the given context.

    Args:
        context: The event being commented on
        rng: Optional generator for reproducible picks; defaults to the
            module-level `random`

    Returns:
        A non-empty line of commentary
    """
    chooser = rng.choice if rng is not None else random.choice
    template = chooser(lines_for(context))
    return template.format(bet=context.bet, chips=context.chips)
