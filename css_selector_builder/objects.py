from typing import Any, Type, TypeVar, Union
import json

from pydantic import BaseModel, Field

from .exceptions import ParseError

T = TypeVar("T")

class Rectangle(BaseModel):
    width: Union[int, float] = Field(default=0)
    height: Union[int, float] = Field(default=0)

    def __init__(self, width: Union[int, float] = 0, height: Union[int, float] = 0, **data: Any):
        super().__init__(width=width, height=height, **data)

    def get_area(self) -> Union[int, float]:
        return self.width * self.height

def get_json(obj: Any) -> str:
    """Return the JSON representation of an object or pydantic model."""
    if isinstance(obj, BaseModel):
        obj = obj.model_dump()
    return json.dumps(obj, separators=(",", ":"))

def from_json(cls: Type[T], json_string: str) -> T:
    """
    Build an instance of ``cls`` from its JSON representation.

    Args:
        cls: Target class. Pydantic models are validated by field name;
            other classes receive the decoded values positionally.
        json_string: JSON text of an object

    Returns:
        Instance of ``cls``

    Raises:
        ParseError: If the JSON is invalid or is not an object
    """
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON string: {str(e)}")

    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")

    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return cls.model_validate(data)
    return cls(*data.values())
