"""Helper for count-dependent wording in reports."""


def pluralize(count: int, singular: str, plural: str) -> str:
    """Return the singular form for a count of one, the plural otherwise."""
    return singular if count == 1 else plural
