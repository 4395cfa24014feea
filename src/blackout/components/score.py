from dataclasses import dataclass


@dataclass(slots=True)
class Score:
    """Session score; only grows until the next session resets it."""
    value: int = 0

    def add(self, amount: int) -> int:
        if amount < 0:
            raise ValueError("score can only increase")
        self.value += amount
        return self.value

    def reset(self) -> None:
        self.value = 0
