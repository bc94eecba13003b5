"""
Query-string assembly for the CRM object endpoints.

HubSpot expects field selections as comma-joined lists and always receives an
explicit `archived` flag, so the helpers here build the string by hand rather
than through httpx params.
"""

from __future__ import annotations

from collections.abc import Sequence


def query_begun_check(begun: bool) -> tuple[str, bool]:
    """Return the separator for the next segment and mark the query as begun."""
    if begun:
        return "&", begun
    return "?", True


def build_paging_query(limit: int | None, after: str | None) -> tuple[str, bool]:
    """
    Build the paging part of a query.

    Returns the query fragment and whether any segment was emitted, so callers can
    keep appending with the right separator.
    """
    query_begun = False

    limit_query = ""
    if limit is not None:
        query_begun = True
        limit_query = f"?limit={limit}"

    after_query = ""
    if after is not None:
        separator, query_begun = query_begun_check(query_begun)
        after_query = f"{separator}after={after}"

    return f"{limit_query}{after_query}", query_begun


def build_query_string(
    query_already_begun: bool,
    properties: Sequence[str],
    properties_with_history: Sequence[str],
    associations: Sequence[str],
    archived: bool,
) -> str:
    """
    Build the field-selection part of a query, ending with the `archived` flag.

    Empty selections are omitted. The archived flag is always emitted.
    """
    query_begun = query_already_begun
    segments: list[str] = []

    for name, values in (
        ("properties", properties),
        ("propertiesWithHistory", properties_with_history),
        ("associations", associations),
    ):
        if not values:
            continue
        separator, query_begun = query_begun_check(query_begun)
        segments.append(f"{separator}{name}={','.join(values)}")

    separator, _ = query_begun_check(query_begun)
    segments.append(f"{separator}archived={str(archived).lower()}")
    return "".join(segments)


def build_query(
    *,
    limit: int | None = None,
    after: str | None = None,
    properties: Sequence[str] = (),
    properties_with_history: Sequence[str] = (),
    associations: Sequence[str] = (),
    archived: bool = False,
) -> str:
    """Build a full object query: paging, field selections, then `archived`."""
    paging_query, query_begun = build_paging_query(limit, after)
    return paging_query + build_query_string(
        query_begun,
        properties,
        properties_with_history,
        associations,
        archived,
    )
