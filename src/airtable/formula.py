"""Builders for Airtable ``filterByFormula`` expressions."""


def field(name: str) -> str:
    return "{" + name + "}"


def quote(value: str) -> str:
    """Render ``value`` as a double-quoted formula string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def lower(expression: str) -> str:
    return f"LOWER({expression})"


def eq(left: str, right: str) -> str:
    return f"{left} = {right}"


def record_id() -> str:
    return "RECORD_ID()"


def or_(*expressions: str) -> str:
    if not expressions:
        raise ValueError("OR() needs at least one expression")
    if len(expressions) == 1:
        return expressions[0]
    return f"OR({', '.join(expressions)})"
