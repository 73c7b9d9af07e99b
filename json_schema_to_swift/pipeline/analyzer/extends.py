"""
Inheritance list composition.

A Swift type inherits from at most one class but conforms to any number
of protocols. The explicit inherits list overrides the schema superclass.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)


def compose_extends(
    super_class: str | None,
    inherits: Sequence[str] = (),
    protocols: Sequence[str] = (),
    is_struct: bool = False,
) -> tuple[str, ...]:
    """
    Compute the ordered inheritance/conformance list.

    Args:
        super_class: Superclass resolved from the schema `extends` key
        inherits: Explicit inheritance list, replaces the superclass
        protocols: Protocols, appended only when there is no superclass
        is_struct: Structs cannot inherit, `inherits` is ignored for them

    Returns:
        Tuple of type names, possibly empty
    """
    extends: list[str] = [super_class] if super_class else []

    if inherits:
        if is_struct:
            logger.warning("inheritance ignored with struct: %s", ", ".join(inherits))
        else:
            extends = list(inherits)

    if not super_class and protocols:
        extends.extend(protocols)

    return tuple(extends)
