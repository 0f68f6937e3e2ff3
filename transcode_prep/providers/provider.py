"""
Abstract interface for transcoding providers.

A provider manages transcoding jobs on some backend (a cloud service, a
local encoder farm, a test double). This module defines the contract every
provider implements and the value types passed across it. Concrete
providers are constructed by factories held in a ProviderRegistry.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from transcode_prep.config import Settings
from transcode_prep.core.crop import Crop
from transcode_prep.core.splice import Splice


class ProviderError(Exception):
    """Base class for provider errors"""


class ProviderAlreadyRegistered(ProviderError):
    def __init__(self, name: str):
        super().__init__(f"provider is already registered: {name}")
        self.name = name


class ProviderNotFound(ProviderError):
    def __init__(self, name: str):
        super().__init__(f"provider not found: {name}")
        self.name = name


class InvalidProviderConfig(ProviderError):
    """Raised by a factory that cannot build its provider from the settings"""


class JobNotFound(ProviderError):
    def __init__(self, job_id: str):
        super().__init__(f"could not find job with id: {job_id}")
        self.job_id = job_id


class State(str, Enum):
    UNKNOWN = "unknown"
    QUEUED = "queued"
    STARTED = "started"
    FINISHED = "finished"
    FAILED = "failed"
    CANCELED = "canceled"


@dataclass
class Job:
    """
    A transcoding job as handed to a provider.

    Attributes:
        id: Job identifier
        source: Source media location
        provider: Name of the provider that should run the job
        source_splice: Source ranges to excise and concatenate; empty means the whole source
        crop: Source crop insets
    """
    id: str
    source: str
    provider: str = ""
    source_splice: Splice = field(default_factory=Splice)
    crop: Crop = field(default_factory=Crop)


@dataclass
class Status:
    """Status of a job as reported by its provider"""
    job_id: str
    state: State = State.UNKNOWN
    message: str = ""
    progress: float = 0.0
    provider_name: str = ""
    provider_job_id: str = ""


@dataclass
class Capabilities:
    """Formats and destinations a provider supports"""
    input_formats: List[str] = field(default_factory=list)
    output_formats: List[str] = field(default_factory=list)
    destinations: List[str] = field(default_factory=list)


@dataclass
class Health:
    ok: bool = False
    message: str = ""


@dataclass
class Description:
    """A provider's name, whether it can be built, and what it reports"""
    name: str
    enabled: bool = False
    capabilities: Capabilities = field(default_factory=Capabilities)
    health: Health = field(default_factory=Health)


class Provider(ABC):
    """
    Abstract base class for transcoding providers.

    Implementations must be able to:
    - Create jobs and report their status
    - Cancel a running job by id
    - Report their own health and capabilities
    """

    @abstractmethod
    def create(self, job: Job) -> Status:
        """Submit job to the backend and return its initial status."""
        pass

    @abstractmethod
    def status(self, job: Job) -> Status:
        """
        Query the backend for the status of job.

        Raises:
            JobNotFound: If the backend doesn't know the job
        """
        pass

    @abstractmethod
    def cancel(self, job_id: str) -> None:
        pass

    @abstractmethod
    def healthcheck(self) -> None:
        """
        Check that the provider can currently transcode.

        Raises:
            Exception: Any exception, explaining what is wrong
        """
        pass

    @abstractmethod
    def capabilities(self) -> Capabilities:
        pass


# A factory builds a provider from settings, raising if it can't
Factory = Callable[[Optional[Settings]], Provider]
