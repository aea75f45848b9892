"""Success / Failure values returned by the aggregate and the handlers.

Expected outcomes such as an unknown project or a second decision on the
same application come back as `Failure`; exceptions are left for storage
and other infrastructure faults. Callers branch with `match`:

    match await handler.handle(command):
        case Success(value=project):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    error: E


type Result[T, E] = Success[T] | Failure[E]
