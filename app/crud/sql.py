"""
Helpers that build parameterized SQL fragments for the CRUD layer.

Both return a fragment using positional placeholders ($1, $2, ...) plus the
values to bind, in placeholder order. Execute the result with
app.core.database.run_query.
"""

from typing import Any, Dict, List, Mapping, NamedTuple, Optional

from app.core.exceptions import InvalidInputError


class PartialUpdate(NamedTuple):
    set_cols: str
    values: List[Any]


class SearchFilter(NamedTuple):
    cols: str
    values: List[Any]


def sql_for_partial_update(data_to_update: Mapping[str, Any], js_to_sql: Dict[str, str]) -> PartialUpdate:
    """
    Build the SET clause of an UPDATE from the fields supplied by the caller.

    Args:
        data_to_update: Field name -> new value, in the order they should appear
        js_to_sql: Field name -> column name, for fields whose column differs

    Returns:
        PartialUpdate, e.g. {firstName: 'Aliya', age: 32} with
        {firstName: 'first_name'} gives '"first_name"=$1, "age"=$2' and ['Aliya', 32]

    Raises:
        InvalidInputError: If there is nothing to update
    """
    keys = list(data_to_update)
    if not keys:
        raise InvalidInputError("No data")

    cols = [f'"{js_to_sql.get(key, key)}"=${idx}' for idx, key in enumerate(keys, start=1)]

    return PartialUpdate(
        set_cols=", ".join(cols),
        values=[data_to_update[key] for key in keys],
    )


def search_filter(criteria: Optional[Mapping[str, Any]] = None) -> SearchFilter:
    """
    Build a WHERE condition from job and company search criteria.

    Recognized keys: title, minSalary, hasEquity (jobs) and name,
    minEmployees, maxEmployees (companies). Other keys are ignored; the
    routes reject them before they get here. Falsy values count as not
    provided, so minSalary=0 and hasEquity=False add no condition.
    """
    cols: List[str] = []
    values: List[Any] = []
    if not criteria:
        return SearchFilter(cols="", values=values)

    def add(condition: str, value: Any) -> None:
        values.append(value)
        cols.append(f"{condition} ${len(values)}")

    # jobs
    if criteria.get("title"):
        add("title ILIKE", f"%{criteria['title']}%")
    if criteria.get("minSalary"):
        add("salary >=", criteria["minSalary"])
    if criteria.get("hasEquity"):
        add("equity >", 0)
    # companies
    if criteria.get("name"):
        add("name ILIKE", f"%{criteria['name']}%")
    if criteria.get("minEmployees"):
        add("num_employees >=", criteria["minEmployees"])
    if criteria.get("maxEmployees"):
        add("num_employees <=", criteria["maxEmployees"])

    return SearchFilter(cols=" AND ".join(cols), values=values)
