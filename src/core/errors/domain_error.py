"""DomainError: the value a Failure carries when a business rule says no.

Domain errors are plain frozen dataclasses, not exceptions. The project
aggregate returns them inside `Failure(error=...)`; application handlers
wrap them in an ApplicationError for the HTTP layer.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
