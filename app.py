import logging
import os

import google.cloud.logging
from flask import Flask, Response

from blueprints import BlueprintEmployee, BlueprintHealth
from blueprints.util import error_response
from containers import Container
from repositories import UpstreamError
from repositories.rest import StaticTokenProvider

logger = logging.getLogger(__name__)


class FlaskMicroservice(Flask):
    container: Container


def setup_cloud_logging() -> None:  # pragma: no cover
    client = google.cloud.logging.Client()
    client.setup_logging()


def configure_employee_svc(container: Container) -> None:
    employee = container.config.svc.employee

    if 'EMPLOYEE_SVC_URL' in os.environ:
        employee.url.from_env('EMPLOYEE_SVC_URL')

    if 'EMPLOYEE_SVC_TOKEN' in os.environ:
        employee.token_provider.from_value(StaticTokenProvider(os.environ['EMPLOYEE_SVC_TOKEN']))

    if 'EMPLOYEE_SVC_TIMEOUT' in os.environ:
        employee.timeout.from_env('EMPLOYEE_SVC_TIMEOUT', as_=float)

    if 'EMPLOYEE_SVC_RETRY_ATTEMPTS' in os.environ:
        employee.retry.attempts.from_env('EMPLOYEE_SVC_RETRY_ATTEMPTS', as_=int)

    if 'EMPLOYEE_SVC_RETRY_INITIAL_DELAY' in os.environ:
        employee.retry.initial_delay.from_env('EMPLOYEE_SVC_RETRY_INITIAL_DELAY', as_=float)

    if 'EMPLOYEE_SVC_RETRY_MULTIPLIER' in os.environ:
        employee.retry.multiplier.from_env('EMPLOYEE_SVC_RETRY_MULTIPLIER', as_=float)

    if 'EMPLOYEE_SVC_RETRY_MAX_DELAY' in os.environ:
        employee.retry.max_delay.from_env('EMPLOYEE_SVC_RETRY_MAX_DELAY', as_=float)

    if os.getenv('EMPLOYEE_SVC_RETRY_WRITES') == '1':
        employee.retry.writes_on_any_error.from_value(True)


def handle_upstream_error(err: UpstreamError) -> Response:
    logger.error('Employee service request failed: %s', err)
    return error_response('Employee service unavailable', 502)


def create_app() -> FlaskMicroservice:
    if os.getenv('ENABLE_CLOUD_LOGGING') == '1':
        setup_cloud_logging()  # pragma: no cover

    app = FlaskMicroservice(__name__)
    app.container = Container()

    configure_employee_svc(app.container)

    app.register_error_handler(UpstreamError, handle_upstream_error)

    app.register_blueprint(BlueprintHealth)
    app.register_blueprint(BlueprintEmployee)

    return app
