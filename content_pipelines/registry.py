#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Transform registry that maps stage names and schema versions to implementations."""

from __future__ import annotations

from typing import Dict, Iterable, List, Type

from .base import BaseTransform, Guide


TRANSFORM_REGISTRY: Dict[str, Type[BaseTransform]] = {}


def register_transform(cls: Type[BaseTransform]) -> Type[BaseTransform]:
    """Decorator used by transform implementations to register themselves."""
    name = getattr(cls, "name", None)
    if not name:
        raise ValueError(f"Transform {cls.__name__} must define name.")
    version = getattr(cls, "schema_version", 0)
    if not isinstance(version, int) or version <= 0:
        raise ValueError(f"Transform {cls.__name__} must define a positive schema_version.")
    for other in TRANSFORM_REGISTRY.values():
        if other.schema_version == version and other.name != name:
            raise ValueError(
                f"Transform {cls.__name__} reuses schema_version={version} already owned by {other.name!r}."
            )
    TRANSFORM_REGISTRY[name] = cls
    return cls


def get_transform(name: str) -> BaseTransform:
    """Instantiate a transform given its stage name."""
    try:
        cls = TRANSFORM_REGISTRY[name]
    except KeyError as exc:
        raise KeyError(f"No transform registered for stage={name!r}.") from exc
    return cls()


def list_transforms() -> Iterable[BaseTransform]:
    """Yield instantiated transforms ordered by schema version."""
    for cls in sorted(TRANSFORM_REGISTRY.values(), key=lambda c: c.schema_version):
        yield cls()


def pending_transforms(guide: Guide) -> List[BaseTransform]:
    """Transforms a single guide still needs, lowest schema version first."""
    return [transform for transform in list_transforms() if transform.needs(guide)]


def latest_schema_version() -> int:
    return max((cls.schema_version for cls in TRANSFORM_REGISTRY.values()), default=0)


# Import transform implementations so they register with the module-level mapping.
from .guides.pipeline import (  # noqa: E402,F401
    EnhancedSchemaTransform,
    GuideDepthTransform,
    LegalSafeDepthTransform,
)


__all__ = [
    "TRANSFORM_REGISTRY",
    "register_transform",
    "get_transform",
    "list_transforms",
    "pending_transforms",
    "latest_schema_version",
]
