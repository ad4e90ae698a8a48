"""Human strategy - reads moves from the terminal."""

from typing import Optional, Sequence

from fishinggame.engine import Card, Snapshot, Suit


class HumanStrategy:
    """Strategy that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def choose_index(self, snapshot: Snapshot, hand: Sequence[Card]) -> Optional[int]:
        print("\n--- Your turn ---")
        print("Your hand:", " ".join(str(c) for c in hand))
        print("Top discard:", snapshot.top_discard or "(none)")
        print("Color to match:", snapshot.current_color.value)
        if snapshot.is_threat_next:
            print(f"Warning: {snapshot.next_player} has one card left!")

        if not snapshot.legal_indexes:
            print("No legal card, you draw.")
            return None

        print("\nLegal moves:")
        for i in snapshot.legal_indexes:
            print(f"  {i}: PLAY {hand[i]}")

        while True:
            try:
                idx = int(input("Enter number: ").strip())
                if idx in snapshot.legal_indexes:
                    return idx
            except ValueError:
                pass
            except EOFError:
                return None
            print("Invalid. Try again.")

    def choose_color(self, snapshot: Snapshot, hand: Sequence[Card]) -> Optional[Suit]:
        suits = list(Suit)
        for i, suit in enumerate(suits):
            print(f"  {i}: {suit.value}")
        while True:
            try:
                idx = int(input("Choose color: ").strip())
                if 0 <= idx < len(suits):
                    return suits[idx]
            except ValueError:
                pass
            except EOFError:
                return None
            print("Invalid. Try again.")
