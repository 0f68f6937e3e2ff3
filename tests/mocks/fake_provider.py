"""
Fake transcoding provider for testing without a backend.

Records the jobs it is given and reports whatever health and capabilities
it was configured with.
"""
from typing import Dict, List, Optional

from transcode_prep.config import Settings
from transcode_prep.providers import (
    Capabilities,
    Factory,
    InvalidProviderConfig,
    Job,
    JobNotFound,
    Provider,
    State,
    Status,
)


class FakeProvider(Provider):
    """
    Provider that keeps jobs in memory.

    Args:
        caps: Capabilities to report
        health: Exception raised by healthcheck(), or None when healthy
    """

    name = 'fake'

    def __init__(self, caps: Optional[Capabilities] = None, health: Optional[Exception] = None):
        self.caps = caps or Capabilities()
        self.health = health
        self.jobs: Dict[str, Job] = {}
        self.canceled: List[str] = []

    def create(self, job: Job) -> Status:
        self.jobs[job.id] = job
        return Status(job_id=job.id, state=State.QUEUED, provider_name=self.name)

    def status(self, job: Job) -> Status:
        if job.id not in self.jobs:
            raise JobNotFound(job.id)
        state = State.CANCELED if job.id in self.canceled else State.STARTED
        return Status(job_id=job.id, state=state, provider_name=self.name)

    def cancel(self, job_id: str) -> None:
        if job_id not in self.jobs:
            raise JobNotFound(job_id)
        self.canceled.append(job_id)

    def healthcheck(self) -> None:
        if self.health is not None:
            raise self.health

    def capabilities(self) -> Capabilities:
        return self.caps

    @classmethod
    def factory(
        cls,
        caps: Optional[Capabilities] = None,
        health: Optional[Exception] = None,
        error: Optional[Exception] = None,
    ) -> Factory:
        """Return a factory building this provider, or raising error if given."""
        def build(settings: Optional[Settings]) -> Provider:
            if error is not None:
                raise error
            return cls(caps=caps, health=health)
        return build


def broken_factory(message: str = 'invalid config') -> Factory:
    return FakeProvider.factory(error=InvalidProviderConfig(message))
