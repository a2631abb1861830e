import logging

from models import Employee
from repositories import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Derived views over the employee list.

    Nothing is cached: every call fetches a fresh snapshot, so two calls may
    see different data.
    """

    def __init__(self, employee_repo: EmployeeRepository) -> None:
        self.employee_repo = employee_repo

    def search(self, name_substring: str) -> list[Employee]:
        needle = name_substring.lower()
        return [employee for employee in self.employee_repo.list_all() if needle in employee.name.lower()]

    def max_salary(self) -> int:
        return max((employee.salary for employee in self.employee_repo.list_all()), default=0)

    def top_earners(self, n: int = 10) -> list[str]:
        # sorted() is stable, ties keep the order the employee service returned them in
        ranked = sorted(self.employee_repo.list_all(), key=lambda employee: employee.salary, reverse=True)
        return [employee.name for employee in ranked[: max(n, 0)]]

    def delete_by_id(self, employee_id: str) -> bool:
        employee = self.employee_repo.get_by_id(employee_id)
        if employee is None:
            return False

        deleted = self.employee_repo.delete_by_name(employee.name)
        if not deleted:
            logger.warning('Employee service did not confirm deletion of %s', employee_id)
        return deleted
