from dataclasses import dataclass, field


@dataclass(frozen=True)
class Employee:
    id: str
    name: str
    salary: int
    age: int
    title: str
    email: str | None = None


@dataclass
class EmployeeInput:
    name: str
    salary: int = field(metadata={'strict': True})
    age: int = field(metadata={'strict': True})
    title: str
