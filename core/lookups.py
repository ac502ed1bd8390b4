"""
Primary-key lookups that answer NotFoundError instead of raising DoesNotExist.
"""

import uuid

from django.core.exceptions import ValidationError

from api.exceptions import NotFoundError


def get_or_not_found(queryset, pk, resource_type: str):
    """
    Fetch one row by primary key.

    Malformed keys (e.g. a non-UUID string for a UUID primary key) are
    treated as absent rows.
    """
    try:
        return queryset.get(pk=pk)
    except (queryset.model.DoesNotExist, ValidationError, ValueError):
        raise NotFoundError(resource_type=resource_type, resource_id=str(pk))


def is_uuid(value) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True
