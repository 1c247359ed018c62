"""Frame time step."""

from __future__ import annotations


class Timestep:
    """Time elapsed between two frames, in seconds."""

    __slots__ = ("_time",)

    def __init__(self, time: float = 0.0) -> None:
        self._time = float(time)

    def __float__(self) -> float:
        return self._time

    @property
    def seconds(self) -> float:
        """The step in seconds."""
        return self._time

    @property
    def milliseconds(self) -> float:
        """The step in milliseconds."""
        return self._time * 1000.0

    def __mul__(self, other: float) -> float:
        return self._time * float(other)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Timestep):
            return self._time == other._time
        if isinstance(other, (int, float)):
            return self._time == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._time)

    def __repr__(self) -> str:
        return f"Timestep({self._time!r})"