import logging
from typing import Any

import marshmallow
import marshmallow_dataclass
from dependency_injector.wiring import Provide
from flask import Blueprint, Response, request
from flask.views import MethodView

from containers import Container
from models import Employee, EmployeeInput
from repositories import EmployeeRepository, UpstreamError
from services import EmployeeService

from .util import class_route, error_response, json_response, validation_error_response

logger = logging.getLogger(__name__)

blp = Blueprint('Employees', __name__)

JSON_VALIDATION_ERROR = 'Request body must be a JSON object.'
EMPLOYEE_NOT_FOUND = 'Employee not found.'
EMPLOYEE_DELETED = 'Employee deleted successfully'

employee_input_schema = marshmallow_dataclass.class_schema(EmployeeInput)(unknown=marshmallow.EXCLUDE)


def employee_to_dict(employee: Employee) -> dict[str, Any]:
    return {
        'id': employee.id,
        'employee_name': employee.name,
        'employee_salary': employee.salary,
        'employee_age': employee.age,
        'employee_title': employee.title,
        'employee_email': employee.email,
    }


@class_route(blp, '/api/v1/employee')
class Employees(MethodView):
    init_every_request = False

    def get(self, employee_repo: EmployeeRepository = Provide[Container.employee_repo]) -> Response:
        employees = employee_repo.list_all()
        return json_response([employee_to_dict(employee) for employee in employees], 200)

    def post(self, employee_repo: EmployeeRepository = Provide[Container.employee_repo]) -> Response:
        req_json = request.get_json(silent=True)
        if not isinstance(req_json, dict):
            return error_response(JSON_VALIDATION_ERROR, 400)

        try:
            data: EmployeeInput = employee_input_schema.load(req_json)
        except marshmallow.ValidationError as err:
            return validation_error_response(err)

        try:
            employee = employee_repo.create(data)
        except UpstreamError as err:
            logger.error('Could not create employee %s: %s', data.name, err)
            return error_response('Employee could not be created.', 400)

        return json_response(employee_to_dict(employee), 200)


@class_route(blp, '/api/v1/employee/search/<search_string>')
class EmployeeSearch(MethodView):
    init_every_request = False

    def get(self, search_string: str, employee_service: EmployeeService = Provide[Container.employee_service]) -> Response:
        try:
            employees = employee_service.search(search_string)
        except UpstreamError as err:
            logger.error('Could not search employees: %s', err)
            return error_response('Employees could not be fetched.', 404)

        return json_response([employee_to_dict(employee) for employee in employees], 200)


@class_route(blp, '/api/v1/employee/highestSalary')
class HighestSalary(MethodView):
    init_every_request = False

    def get(self, employee_service: EmployeeService = Provide[Container.employee_service]) -> Response:
        return json_response(employee_service.max_salary(), 200)


@class_route(blp, '/api/v1/employee/topTenHighestEarningEmployeeNames')
class TopTenEarners(MethodView):
    init_every_request = False

    def get(self, employee_service: EmployeeService = Provide[Container.employee_service]) -> Response:
        return json_response(employee_service.top_earners(10), 200)


@class_route(blp, '/api/v1/employee/<employee_id>')
class EmployeeDetail(MethodView):
    init_every_request = False

    def get(self, employee_id: str, employee_repo: EmployeeRepository = Provide[Container.employee_repo]) -> Response:
        employee = employee_repo.get_by_id(employee_id)

        if employee is None:
            return error_response(EMPLOYEE_NOT_FOUND, 404)

        return json_response(employee_to_dict(employee), 200)

    def delete(
        self,
        employee_id: str,
        employee_service: EmployeeService = Provide[Container.employee_service],
    ) -> Response:
        if not employee_service.delete_by_id(employee_id):
            return error_response(EMPLOYEE_NOT_FOUND, 404)

        return json_response(EMPLOYEE_DELETED, 200)
