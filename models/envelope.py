from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar('T')


@dataclass
class Envelope(Generic[T]):
    data: T | None
    status: str | None = None
    error_message: str | None = None
