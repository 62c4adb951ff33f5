"""Back/forward history of visited directories."""

from dataclasses import dataclass, field


@dataclass
class HistoryStacks:
    """Two LIFO stacks of visited paths; the top of each stack is its last element."""

    _back: list[str] = field(default_factory=list)
    _forward: list[str] = field(default_factory=list)

    def push_back(self, path: str) -> None:
        """Push a path onto the back stack."""
        self._back.append(path)

    def push_forward(self, path: str) -> None:
        """Push a path onto the forward stack."""
        self._forward.append(path)

    def pop_back(self) -> str | None:
        """Pop and return the most recent back path, or None if empty."""
        if self._back:
            return self._back.pop()
        return None

    def pop_forward(self) -> str | None:
        """Pop and return the most recent forward path, or None if empty."""
        if self._forward:
            return self._forward.pop()
        return None

    def clear_forward(self) -> None:
        """Drop the forward history (a new directory was chosen)."""
        self._forward.clear()

    def can_go_back(self) -> bool:
        return len(self._back) > 0

    def can_go_forward(self) -> bool:
        return len(self._forward) > 0

    @property
    def back(self) -> list[str]:
        return list(self._back)

    @property
    def forward(self) -> list[str]:
        return list(self._forward)

    def copy(self) -> "HistoryStacks":
        """Return an independent copy of both stacks."""
        return HistoryStacks(list(self._back), list(self._forward))
