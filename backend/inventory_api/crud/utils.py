from typing import Any, Dict

from pydantic import AnyUrl, BaseModel


def column_values(obj_in: BaseModel, *, exclude_unset: bool = False) -> Dict[str, Any]:
    """
    Dump a schema into column values. URLs are stored as plain text;
    Decimal and the other scalars are passed through for the driver.
    """
    data = obj_in.model_dump(exclude_unset=exclude_unset)
    return {
        field: str(value) if isinstance(value, AnyUrl) else value
        for field, value in data.items()
    }
