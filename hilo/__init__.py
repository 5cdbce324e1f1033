"""
hilo: a higher/lower card wagering game.

The dealer shows a card, the player bets chips on whether the next card ranks
higher or lower. Game state is immutable; every round produces a new snapshot
through the pure transitions in `hilo.higher_lower`.
"""
