from dependency_injector import containers, providers

from repositories.rest import RestEmployeeRepository, RetryPolicy
from services import EmployeeService


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(packages=['blueprints'])

    config = providers.Configuration(
        default={
            'svc': {
                'employee': {
                    'url': 'http://localhost:8112',
                    'token_provider': None,
                    'timeout': 10,
                    'retry': {
                        'attempts': 5,
                        'initial_delay': 30,
                        'multiplier': 2,
                        'max_delay': 180,
                        'writes_on_any_error': False,
                    },
                },
            },
        },
    )

    retry_policy = providers.Factory(
        RetryPolicy,
        attempts=config.svc.employee.retry.attempts,
        initial_delay=config.svc.employee.retry.initial_delay,
        multiplier=config.svc.employee.retry.multiplier,
        max_delay=config.svc.employee.retry.max_delay,
        retry_writes_on_any_error=config.svc.employee.retry.writes_on_any_error,
    )

    employee_repo = providers.ThreadSafeSingleton(
        RestEmployeeRepository,
        base_url=config.svc.employee.url,
        token_provider=config.svc.employee.token_provider,
        retry_policy=retry_policy,
        timeout=config.svc.employee.timeout,
    )

    employee_service = providers.Factory(EmployeeService, employee_repo=employee_repo)
