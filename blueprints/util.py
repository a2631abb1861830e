import json
from collections.abc import Callable
from typing import Any

import marshmallow
from flask import Blueprint, Response
from flask.views import MethodView


def class_route(blueprint: Blueprint, rule: str, **options: Any) -> Callable[[type[MethodView]], type[MethodView]]:  # noqa: ANN401
    def decorator(cls: type[MethodView]) -> type[MethodView]:
        blueprint.add_url_rule(rule, view_func=cls.as_view(cls.__name__), **options)
        return cls

    return decorator


def json_response(data: Any, status: int) -> Response:  # noqa: ANN401
    return Response(json.dumps(data), status=status, mimetype='application/json')


def error_response(msg: str, code: int) -> Response:
    return json_response({'message': msg, 'code': code}, code)


def validation_error_response(err: marshmallow.ValidationError) -> Response:
    messages = err.normalized_messages()
    msg = '; '.join(f'Invalid value for {field}: {" ".join(map(str, errors))}' for field, errors in messages.items())
    return error_response(msg, 400)
