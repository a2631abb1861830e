from typing import cast
from unittest.mock import Mock

from faker import Faker
from unittest_parametrize import ParametrizedTestCase, parametrize

from models import Employee
from repositories import EmployeeRepository, UpstreamUnavailableError
from services import EmployeeService


class TestEmployeeService(ParametrizedTestCase):
    def setUp(self) -> None:
        self.faker = Faker()
        self.repo = Mock(EmployeeRepository)
        self.service = EmployeeService(self.repo)

    def gen_employee(self, name: str | None = None, salary: int | None = None) -> Employee:
        return Employee(
            id=cast(str, self.faker.uuid4()),
            name=name if name is not None else self.faker.name(),
            salary=salary if salary is not None else self.faker.pyint(min_value=0, max_value=500000),
            age=self.faker.pyint(min_value=16, max_value=75),
            title=self.faker.job(),
            email=self.faker.email(),
        )

    def set_employees(self, employees: list[Employee]) -> None:
        cast(Mock, self.repo.list_all).return_value = employees

    def test_search_case_insensitive(self) -> None:
        alice = self.gen_employee('Alice Johnson')
        bob = self.gen_employee('Bob Stone')
        alison = self.gen_employee('ALISON Burke')
        self.set_employees([alice, bob, alison])

        self.assertEqual(self.service.search('ali'), [alice, alison])

    def test_search_no_match(self) -> None:
        self.set_employees([self.gen_employee('Alice'), self.gen_employee('Bob')])

        self.assertEqual(self.service.search('zed'), [])

    def test_search_random_lists(self) -> None:
        employees = [self.gen_employee() for _ in range(30)]
        self.set_employees(employees)
        needle = employees[0].name[1:3].upper()

        result = self.service.search(needle)

        self.assertTrue(all(needle.lower() in employee.name.lower() for employee in result))
        self.assertEqual(result, [e for e in employees if needle.lower() in e.name.lower()])

    def test_search_propagates_upstream_failure(self) -> None:
        cast(Mock, self.repo.list_all).side_effect = UpstreamUnavailableError('down')

        with self.assertRaises(UpstreamUnavailableError):
            self.service.search('a')

    def test_max_salary_empty(self) -> None:
        self.set_employees([])

        self.assertEqual(self.service.max_salary(), 0)

    def test_max_salary(self) -> None:
        employees = [self.gen_employee() for _ in range(20)]
        self.set_employees(employees)

        self.assertEqual(self.service.max_salary(), max(e.salary for e in employees))

    def test_scenario_ties(self) -> None:
        self.set_employees(
            [
                self.gen_employee('Alice', 100),
                self.gen_employee('Bob', 500),
                self.gen_employee('Cara', 500),
            ]
        )

        self.assertEqual(self.service.max_salary(), 500)
        self.assertEqual(self.service.top_earners(2), ['Bob', 'Cara'])

    def test_top_earners_keeps_upstream_order_on_ties(self) -> None:
        self.set_employees([self.gen_employee('Cara', 500), self.gen_employee('Bob', 500)])

        self.assertEqual(self.service.top_earners(), ['Cara', 'Bob'])

    @parametrize(
        'count,n',
        [
            (0, 10),
            (3, 10),
            (10, 10),
            (25, 10),
            (5, 2),
            (5, 0),
            (5, -1),
        ],
    )
    def test_top_earners_length_and_order(self, count: int, n: int) -> None:
        employees = [self.gen_employee(f'Employee {i}') for i in range(count)]
        self.set_employees(employees)

        names = self.service.top_earners(n)

        self.assertEqual(len(names), min(max(n, 0), count))
        salary_by_name = {e.name: e.salary for e in employees}
        salaries = [salary_by_name[name] for name in names]
        self.assertEqual(salaries, sorted(salaries, reverse=True))
        self.assertEqual(salaries, sorted((e.salary for e in employees), reverse=True)[: len(names)])

    def test_delete_by_id(self) -> None:
        employee = self.gen_employee()
        cast(Mock, self.repo.get_by_id).return_value = employee
        cast(Mock, self.repo.delete_by_name).return_value = True

        self.assertTrue(self.service.delete_by_id(employee.id))
        cast(Mock, self.repo.delete_by_name).assert_called_once_with(employee.name)

    def test_delete_by_id_not_found(self) -> None:
        cast(Mock, self.repo.get_by_id).return_value = None

        self.assertFalse(self.service.delete_by_id(cast(str, self.faker.uuid4())))
        cast(Mock, self.repo.delete_by_name).assert_not_called()

    def test_delete_by_id_not_confirmed(self) -> None:
        cast(Mock, self.repo.get_by_id).return_value = self.gen_employee()
        cast(Mock, self.repo.delete_by_name).return_value = False

        self.assertFalse(self.service.delete_by_id(cast(str, self.faker.uuid4())))
