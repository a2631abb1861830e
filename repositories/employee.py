from models import Employee, EmployeeInput


class EmployeeRepository:
    def list_all(self) -> list[Employee]:
        raise NotImplementedError  # pragma: no cover

    def get_by_id(self, employee_id: str) -> Employee | None:
        raise NotImplementedError  # pragma: no cover

    def create(self, employee: EmployeeInput) -> Employee:
        raise NotImplementedError  # pragma: no cover

    def delete_by_name(self, name: str) -> bool:
        raise NotImplementedError  # pragma: no cover
