"""Request body helpers shared by API endpoints.

- json_object() returns the request body as a dict or raises ValidationError
- @validate_request parses the body into the pydantic model annotated on
  the view's `data` parameter
"""

import inspect
from functools import wraps
from typing import Any, get_type_hints

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError


def json_object() -> dict[str, Any]:
    """Get the request body as a JSON object.

    Raises:
        ValidationError: If the body is missing, not JSON, or not an object
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError(
            "Request body must be a JSON object",
            {"errors": [{"field": "body", "code": "type", "message": "Expected a JSON object"}]}
        )
    return body


def validate_request(f):
    """
    Validate the request body against the view's `data` annotation.

    Path parameters pass through untouched; the parsed model is injected
    as the `data` keyword argument.

    Example:
    ```python
    @auth_bp.post("/auth/login")
    @validate_request
    def login(data: UserLogin):
        ...
    ```

    Raises:
        ValidationError: If the body is missing or fails the model's constraints
    """
    hints = get_type_hints(f)
    model = hints.get("data")
    if "data" not in inspect.signature(f).parameters or not (
        inspect.isclass(model) and issubclass(model, BaseModel)
    ):
        raise TypeError(f"{f.__name__} needs a 'data' parameter annotated with a pydantic model")

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            kwargs["data"] = model.model_validate(json_object())
        except PydanticValidationError as e:
            raise ValidationError(
                "Invalid request data",
                {"errors": [
                    {
                        "field": ".".join(str(part) for part in error["loc"]),
                        "code": error["type"],
                        "message": error["msg"],
                    }
                    for error in e.errors()
                ]}
            )
        return f(*args, **kwargs)

    return wrapper
