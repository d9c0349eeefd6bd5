# roster/api/models/modelmaker.py
from typing import Any, Optional, Type

from pydantic import BaseModel, ConfigDict, create_model
from sqlalchemy import inspect
from sqlalchemy.orm import DeclarativeBase


def make_pydantic_model_from_sqlalchemy(
    model_cls: Type[DeclarativeBase], *, name_suffix: str = "Read"
) -> Type[BaseModel]:
    """Response model with one field per mapped column of ``model_cls``.

    Columns that may be unset before a flush (nullable or defaulted) are
    optional. Instances validate straight from ORM objects.
    """
    fields: dict[str, Any] = {}
    for attr in inspect(model_cls).column_attrs:
        col = attr.columns[0]
        try:
            python_type = col.type.python_type
        except NotImplementedError:
            python_type = Any
        if col.nullable or col.default is not None or col.server_default is not None:
            fields[attr.key] = (Optional[python_type], None)
        else:
            fields[attr.key] = (python_type, ...)

    return create_model(
        f"{model_cls.__name__}{name_suffix}",
        __config__=ConfigDict(from_attributes=True),
        **fields,
    )
