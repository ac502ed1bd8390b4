"""
Public URL slugs derived from hero aliases.
"""

import re

_STRIP_RE = re.compile(r'[^A-Za-z0-9_\s-]')
_COLLAPSE_RE = re.compile(r'[\s_-]+')


def slugify_alias(alias: str) -> str:
    """
    Derive the URL slug for an alias.

    Lower-cases and trims the alias, drops everything except ASCII word
    characters, whitespace and hyphens, collapses runs of whitespace,
    underscores and hyphens into one hyphen and trims hyphens at both ends.

    >>> slugify_alias('  Ana_Maria!!  ')
    'ana-maria'
    """
    slug = (alias or '').lower().strip()
    slug = _STRIP_RE.sub('', slug)
    slug = _COLLAPSE_RE.sub('-', slug)
    return slug.strip('-')
