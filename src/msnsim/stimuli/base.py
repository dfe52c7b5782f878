"""Base class for stimulus patterns."""

from abc import ABC, abstractmethod


class StimulusPattern(ABC):
    """Abstract base class for per-step injected currents.

    All stimulus patterns must implement get_input(timestep) to provide the
    scalar current for a given simulation step. Patterns hold no mutable
    state: the same timestep always yields the same current.

    Subclasses:
        - RectangularPulse: Constant amplitude inside an open step window
        - Sequential: Explicit per-step values
    """

    @abstractmethod
    def get_input(self, timestep: int) -> float:
        """Get injected current for given timestep.

        Args:
            timestep: Current simulation step index

        Returns:
            Current for this step (0.0 when inactive)
        """

    @abstractmethod
    def duration_timesteps(self) -> int:
        """Index of the first step after which the stimulus is always silent."""

    def as_list(self, n_steps: int) -> list[float]:
        """Evaluate the pattern over steps 0 .. n_steps - 1."""
        return [self.get_input(t) for t in range(n_steps)]
