"""
Base use case classes.

Use cases raise domain exceptions for rejected input and return a
``UseCaseResult`` otherwise. Recoverable problems that did not stop the use
case (an unknown coupon, an invoice that could not be written) travel back as
``warnings`` on the result.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, Iterable, List, Optional, TypeVar

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass
class UseCaseResult(Generic[OutputDTO]):
    """Result wrapper for use cases."""
    success: bool
    data: Optional[OutputDTO] = None
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def ok(cls, data: OutputDTO, warnings: Iterable[str] = ()) -> 'UseCaseResult[OutputDTO]':
        """Create a successful result, optionally carrying warnings."""
        return cls(success=True, data=data, warnings=list(warnings))

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """Base use case class."""

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        """Execute the use case."""
        pass
