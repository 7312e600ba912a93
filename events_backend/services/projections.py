"""Relation-count projection.

Adds per-row aggregate columns to an entity query as correlated scalar
subqueries, so a listing of N rows is still one SELECT.
"""
from typing import Mapping, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Query, with_expression


def count_related(relationship_attr, criterion=None):
    """Correlated ``COUNT(*)`` of the rows behind a one-to-many relationship.

    ``relationship_attr`` is the parent-side attribute (e.g. ``Event.attendees``);
    ``criterion`` optionally narrows the counted child rows.
    """
    prop = relationship_attr.property
    target = prop.mapper.class_

    stmt = select(func.count()).select_from(target)
    for local, remote in prop.local_remote_pairs:
        stmt = stmt.where(remote == local)
    if criterion is not None:
        stmt = stmt.where(criterion)

    return stmt.correlate_except(prop.target).scalar_subquery()


def with_relation_counts(query: Query, relationship_attr, outputs: Mapping[str, Optional[object]]) -> Query:
    """Populate ``query_expression`` attributes with relation counts.

    ``outputs`` maps attribute names on the parent model to an optional
    criterion over the related entity (``None`` counts every related row).
    """
    parent = relationship_attr.class_
    options = [
        with_expression(getattr(parent, name), count_related(relationship_attr, criterion))
        for name, criterion in outputs.items()
    ]
    # Rows already in the identity map would otherwise keep stale/empty counts.
    return query.options(*options).populate_existing()
