"""
Helper cho các route nhận multipart/form-data (kèm file ảnh).

Form field luôn là chuỗi, nên dữ liệu được gom lại rồi validate bằng chính
schema pydantic của JSON body để hai kiểu request có cùng quy tắc.
"""

import json
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_errors(errors: Sequence[Dict[str, Any]]) -> str:
    messages = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(messages)


def validate_form(model: Type[ModelT], data: Dict[str, Any]) -> ModelT:
    # Bỏ các field không được gửi lên để partial update hoạt động đúng
    provided = {key: value for key, value in data.items() if value is not None}
    try:
        return model.model_validate(provided)
    except PydanticValidationError as e:
        raise ValidationError(format_errors(e.errors()))


def parse_list_field(values: Optional[List[str]], field: str) -> Optional[List[Any]]:
    """Nhận list dạng field lặp lại hoặc một chuỗi JSON array"""
    if not values:
        return None
    if len(values) == 1 and values[0].strip().startswith("["):
        try:
            parsed = json.loads(values[0])
        except json.JSONDecodeError:
            raise ValidationError(f"{field}: must be a JSON array")
        if not isinstance(parsed, list):
            raise ValidationError(f"{field}: must be a JSON array")
        return parsed
    return values


def parse_json_object_field(value: Optional[str], field: str) -> Optional[Dict[str, Any]]:
    if value is None or not value.strip():
        return None
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError:
        raise ValidationError(f"{field}: must be a JSON object")
    if not isinstance(parsed, dict):
        raise ValidationError(f"{field}: must be a JSON object")
    return parsed
