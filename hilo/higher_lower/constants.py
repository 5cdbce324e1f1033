"""Higher/lower rule constants and status messages."""

# Chips every game starts with
STARTING_CHIPS = 3

# Smallest accepted bet; the largest is the player's current chip count
MIN_BET = 1

GAME_OVER_MESSAGE = "Game is over. Click 'New Game' to play again."
INVALID_GUESS_MESSAGE = "Guess must be 'higher' or 'lower'."
WHOLE_NUMBER_MESSAGE = "Bet must be a whole number."
BET_RANGE_MESSAGE = "Bet must be between {min_bet} and {chips}."
EMPTY_DECK_MESSAGE = "No more cards to draw. Game over!"


def bet_range_message(chips: int) -> str:
    """Message reporting the range of bets a player holding `chips` may place."""
    return BET_RANGE_MESSAGE.format(min_bet=MIN_BET, chips=chips)
