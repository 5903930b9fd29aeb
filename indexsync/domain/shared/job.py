"""Jobs, job handlers, and the handler registry."""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import (
    Any,
    ClassVar,
    Generic,
    Iterator,
    NewType,
    TypeVar,
    get_args,
    get_origin,
)
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from indexsync.domain.shared.error import ConfigurationError
from indexsync.domain.shared.service import DataclassMeta

JobId = NewType("JobId", UUID)

J = TypeVar("J", bound="Job")


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _new_job_id() -> JobId:
    return JobId(uuid4())


class JobStatus(StrEnum):
    """Lifecycle of a job in the job store."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class Job(BaseModel):
    """Base class for deferred operations.

    Jobs are immutable once constructed and consumed exactly once by a
    handler. Subclasses are automatically registered by name in Job._registry
    so the job store can rebuild them from their payload.
    """

    model_config = ConfigDict(frozen=True)

    id: JobId = Field(default_factory=_new_job_id)
    created_at: datetime = Field(default_factory=_utc_now)

    _registry: ClassVar[dict[str, type["Job"]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._registry[cls.__name__] = cls

    @classmethod
    def from_payload(cls, job_type: str, payload: dict[str, Any]) -> "Job":
        """Rebuild a job from its stored type name and JSON payload."""
        job_cls = cls._registry.get(job_type)
        if job_cls is None:
            raise ConfigurationError(f"Unknown job type: {job_type}")
        return job_cls.model_validate(payload)


# --- JobHandler ---


def _extract_job_type(cls: type) -> type[Job] | None:
    """Extract the job type J from JobHandler[J] in class bases."""
    for base in getattr(cls, "__orig_bases__", []):
        origin = get_origin(base)
        if origin is not None and getattr(origin, "__name__", None) == "JobHandler":
            args = get_args(base)
            if args and isinstance(args[0], type) and issubclass(args[0], Job):
                return args[0]
    return None


class _JobHandlerMeta(DataclassMeta):
    """DataclassMeta that also records __job_type__ from the JobHandler[J] base."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        job_type = _extract_job_type(cls)
        if job_type is not None:
            cls.__job_type__ = job_type
        return cls


class JobHandler(Generic[J], metaclass=_JobHandlerMeta):
    """Base class for job handlers.

    Subclasses are automatically dataclasses with DI-injected dependencies.
    The __job_type__ is extracted from the generic parameter.

    Example:
        class ClearIndexJobHandler(JobHandler[ClearIndexJob]):
            backend: SearchBackend

            async def handle(self, job: ClearIndexJob) -> None:
                await self.backend.clear_index(job.index_name)
    """

    __job_type__: ClassVar[type[Job]]

    async def handle(self, job: J) -> None:
        raise NotImplementedError(f"{type(self).__name__} must implement handle()")


@dataclass(frozen=True)
class JobHandlerRegistry:
    """Maps job types to the handler instance that executes them."""

    handlers: tuple[JobHandler[Any], ...]

    def for_job(self, job: Job) -> JobHandler[Any]:
        """Return the handler for a job.

        Raises:
            ConfigurationError: If no handler is registered for the job type.
        """
        for handler in self.handlers:
            if isinstance(job, handler.__job_type__):
                return handler
        raise ConfigurationError(f"No handler registered for {type(job).__name__}")

    def __iter__(self) -> Iterator[JobHandler[Any]]:
        return iter(self.handlers)

    def __len__(self) -> int:
        return len(self.handlers)
