"""Course checkpoint progress value object.

Usage:
    from campus_client.domain.value_objects import CourseProgress

    progress = CourseProgress.from_api(response["data"]["progress"])
    progress.percentage  # 67
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Self


@dataclass(frozen=True, slots=True)
class CourseProgress:
    """Completed vs total checkpoints of one enrollment.

    Attributes:
        completed_checkpoints: Checkpoints the student finished.
        total_checkpoints: Checkpoints in the course.
    """

    completed_checkpoints: int
    total_checkpoints: int

    def __post_init__(self) -> None:
        """Validate counts.

        Raises:
            ValueError: If a count is negative or completed exceeds total.
        """
        if self.completed_checkpoints < 0 or self.total_checkpoints < 0:
            raise ValueError("Checkpoint counts cannot be negative")
        if self.completed_checkpoints > self.total_checkpoints:
            raise ValueError(
                f"Completed checkpoints ({self.completed_checkpoints}) exceed "
                f"total ({self.total_checkpoints})"
            )

    @classmethod
    def from_api(cls, payload: Mapping[str, Any] | None) -> Self:
        """Build from the backend's `progress` object.

        A missing payload means no progress recorded yet. The backend keeps
        counting checkpoints removed from the course after completion, so
        `completedCheckpoints` is clamped to `totalCheckpoints`.

        Args:
            payload: Object with `completedCheckpoints` and `totalCheckpoints`.

        Returns:
            CourseProgress instance.
        """
        if not payload:
            return cls(0, 0)
        total = int(payload.get("totalCheckpoints") or 0)
        completed = int(payload.get("completedCheckpoints") or 0)
        return cls(min(completed, total), total)

    @property
    def percentage(self) -> int:
        """Completion percentage, rounded half up; 0 for an empty course."""
        if self.total_checkpoints == 0:
            return 0
        # Integer round-half-up of completed * 100 / total
        return (self.completed_checkpoints * 200 + self.total_checkpoints) // (
            2 * self.total_checkpoints
        )

    @property
    def remaining_checkpoints(self) -> int:
        """Checkpoints still to complete."""
        return self.total_checkpoints - self.completed_checkpoints

    @property
    def is_complete(self) -> bool:
        """True once every checkpoint of a non-empty course is done."""
        return self.total_checkpoints > 0 and self.remaining_checkpoints == 0
