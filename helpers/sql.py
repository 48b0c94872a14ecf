"""SQL-building helpers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from errors import BadRequestError

# Scalars the sqlite3 driver accepts as bind parameters
Bindable = Union[str, int, float, bool, None]


@dataclass(frozen=True)
class PartialUpdate:
    set_cols: str
    values: list[Bindable] = field(default_factory=list)


def sql_for_partial_update(
    data_to_update: Mapping[str, Bindable], js_to_sql: Mapping[str, str]
) -> PartialUpdate:
    """Build the SET clause of an UPDATE for the fields present in *data_to_update*.

    *js_to_sql* maps API field names to column names; fields missing from it
    are used as column names verbatim. Values are never interpolated, only
    their ``$N`` placeholder is:

        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32},
        ...                        {"firstName": "first_name"})
        PartialUpdate(set_cols='"first_name"=$1, "age"=$2', values=['Aliya', 32])

    Raises BadRequestError if there is nothing to update.
    """
    keys = list(data_to_update)
    if not keys:
        raise BadRequestError("No data")

    # {firstName: 'Aliya', age: 32} => ['"first_name"=$1', '"age"=$2']
    cols = [
        f'"{js_to_sql.get(key, key)}"=${idx}'
        for idx, key in enumerate(keys, start=1)
    ]

    return PartialUpdate(
        set_cols=", ".join(cols),
        values=[data_to_update[key] for key in keys],
    )


def bind_params(values: list[Any], *extra: Any) -> dict[str, Any]:
    """Map positional values onto sqlite's ``$1, $2, ...`` named parameters.

    sqlite3 looks ``$N`` parameters up by name (without the ``$``), so the
    list becomes ``{"1": values[0], "2": values[1], ...}``. *extra* values
    follow, for the WHERE placeholder that comes after the SET clause.
    """
    return {str(idx): value for idx, value in enumerate([*values, *extra], start=1)}
