from dataclasses import asdict
from typing import Any
from uuid import UUID

import dacite
import requests

from models import Employee, EmployeeInput, Envelope
from repositories import EmployeeRepository, UpstreamError

from .base import RestBaseRepository
from .util import RetryPolicy, TokenProvider

EMPLOYEE_FIELDS = {
    'employee_name': 'name',
    'employee_salary': 'salary',
    'employee_age': 'age',
    'employee_title': 'title',
    'employee_email': 'email',
}


def employee_from_json(json: Any) -> Employee:  # noqa: ANN401
    if not isinstance(json, dict):
        raise UpstreamError(f'Expected an employee object, got {type(json).__name__}')

    data = {EMPLOYEE_FIELDS.get(key, key): value for key, value in json.items()}
    try:
        return dacite.from_dict(data_class=Employee, data=data)
    except dacite.DaciteError as err:
        raise UpstreamError(f'Malformed employee: {err}') from err


def unwrap(resp: requests.Response) -> Envelope[Any]:
    try:
        body = resp.json()
    except ValueError as err:
        raise UpstreamError('Employee service returned a body that is not JSON') from err

    if not isinstance(body, dict):
        raise UpstreamError('Employee service returned a body that is not an envelope')

    return Envelope(
        data=body.get('data'),
        status=body.get('status'),
        error_message=body.get('errorMessage', body.get('error')),
    )


class RestEmployeeRepository(EmployeeRepository, RestBaseRepository):
    def __init__(
        self,
        base_url: str,
        token_provider: TokenProvider | None,
        retry_policy: RetryPolicy | None = None,
        timeout: float = 10,
    ) -> None:
        RestBaseRepository.__init__(self, base_url, token_provider, retry_policy, timeout)
        self.collection_url = f'{self.base_url}/api/v1/employee'

    def list_all(self) -> list[Employee]:
        return self.with_retry(self._list_all)

    def _list_all(self) -> list[Employee]:
        resp = self.authenticated_get(self.collection_url)

        if resp.status_code == requests.codes.ok:
            envelope = unwrap(resp)
            if not isinstance(envelope.data, list):
                raise UpstreamError(envelope.error_message or 'Employee list missing from response')
            return [employee_from_json(item) for item in envelope.data]

        self.unexpected_error(resp)  # noqa: RET503

    def get_by_id(self, employee_id: str) -> Employee | None:
        try:
            uuid = UUID(employee_id)
        except ValueError:
            return None

        return self.with_retry(lambda: self._get_by_id(uuid))

    def _get_by_id(self, uuid: UUID) -> Employee | None:
        resp = self.authenticated_get(f'{self.collection_url}/{uuid}')

        if resp.status_code == requests.codes.ok:
            envelope = unwrap(resp)
            return None if envelope.data is None else employee_from_json(envelope.data)

        if resp.status_code == requests.codes.not_found:
            return None

        self.unexpected_error(resp)  # noqa: RET503

    def create(self, employee: EmployeeInput) -> Employee:
        return self.with_retry(lambda: self._create(employee), write=True)

    def _create(self, employee: EmployeeInput) -> Employee:
        resp = self.authenticated_post(self.collection_url, asdict(employee))

        if resp.status_code in (requests.codes.ok, requests.codes.created):
            envelope = unwrap(resp)
            if envelope.data is None:
                raise UpstreamError(envelope.error_message or 'Created employee missing from response')
            return employee_from_json(envelope.data)

        self.unexpected_error(resp)  # noqa: RET503

    def delete_by_name(self, name: str) -> bool:
        return self.with_retry(lambda: self._delete_by_name(name), write=True)

    def _delete_by_name(self, name: str) -> bool:
        resp = self.authenticated_delete(self.collection_url, {'name': name})

        if resp.status_code == requests.codes.ok:
            return unwrap(resp).data is True

        if resp.status_code == requests.codes.not_found:
            return False

        self.unexpected_error(resp)  # noqa: RET503
