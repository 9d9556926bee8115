#!/usr/bin/env python3
"""
SMACKSPEC MANIFEST BUILDER (Stage 4)
------------------------------------
Folds the classified directives into one Manifest, enforcing cardinality:
'provides' exactly once, 'requires' any number of times (source order kept),
every other key at most once.

Author: Smackspec Team
Date: 2026-10-18
"""

from typing import Optional, Sequence, TypeVar

from smackspec.core.errors import DuplicateFieldError, MissingRequiredFieldError
from smackspec.core.models import (
    OPAQUE_KEYS,
    Description,
    Directive,
    DirectiveKey,
    Manifest,
    Provides,
    Requires,
    Unparsed,
)

T = TypeVar("T", bound=Directive)


def at_most_one(matches: Sequence[T], key: DirectiveKey) -> Optional[T]:
    """
    Returns the single match or None. A second occurrence is reported at
    its own line, not the first one's.
    """
    if len(matches) > 1:
        raise DuplicateFieldError(key.value, matches[1].position.line)
    return matches[0] if matches else None


class ManifestBuilder:

    def build(self, directives: Sequence[Directive]) -> Manifest:
        provides = at_most_one([d for d in directives if isinstance(d, Provides)], DirectiveKey.PROVIDES)
        if provides is None:
            raise MissingRequiredFieldError(DirectiveKey.PROVIDES.value)

        description = at_most_one([d for d in directives if isinstance(d, Description)], DirectiveKey.DESCRIPTION)
        requires = tuple(d for d in directives if isinstance(d, Requires))

        opaque = {}
        for key in OPAQUE_KEYS:
            found = at_most_one([d for d in directives if isinstance(d, Unparsed) and d.key is key], key)
            if found is not None:
                opaque[key.field_name] = found.value

        return Manifest(
            provides=provides,
            description=description.text if description else None,
            requires=requires,
            **opaque
        )
