"""
Queue handles.

A handle is a local, unverified reference to a named pipeline. Creating one
never talks to the server.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from jobs_rpc.types.rpc import Stat

if TYPE_CHECKING:
    from jobs_rpc.jobs import Jobs


@dataclass(frozen=True)
class QueueHandle:
    """
    Reference to a pipeline on the job server.

    The facade reference only routes commands; it is excluded from equality,
    so two handles for the same name are interchangeable.
    """

    name: str
    jobs: "Jobs" = field(compare=False, repr=False)

    def pause(self) -> None:
        """Pause this pipeline."""
        self.jobs.pause([self])

    def resume(self) -> None:
        """Resume this pipeline."""
        self.jobs.resume([self])

    def destroy(self) -> None:
        """Destroy this pipeline."""
        self.jobs.destroy([self])

    def get_pipeline_stat(self) -> Stat | None:
        """
        Get runtime statistics for this pipeline.

        Returns:
            The pipeline's stat or None if the server does not report it.
        """
        for stat in self.jobs.stats():
            if stat.pipeline == self.name:
                return stat
        return None

    def is_paused(self) -> bool:
        """Check if the pipeline exists and is not consuming."""
        stat = self.get_pipeline_stat()
        return stat is not None and not stat.ready
