"""Command and CommandHandler base classes."""

from abc import abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

from indexsync.domain.shared.service import DataclassMeta


class Command(BaseModel): ...


class Result(BaseModel): ...


C = TypeVar("C", bound=Command)
R = TypeVar("R", bound=Result)


class CommandHandler(Generic[C, R], metaclass=DataclassMeta):
    """Base class for command handlers. Subclasses are automatically dataclasses."""

    @abstractmethod
    async def run(self, cmd: C) -> R: ...
