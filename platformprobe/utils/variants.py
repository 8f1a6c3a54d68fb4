"""
Build variant discovery for Android-style projects.

An Android project compiles a variant-named compilation instead of "main",
so the main compilation name comes from the variant named "release".
"""

from typing import List

from ..cli_logger import logger
from ..errors import ConfigurationError
from ..host.android import RELEASE
from ..host.kotlin import MAIN_COMPILATION_NAME

# Variant collections an android extension may expose, depending on its kind.
VARIANT_COLLECTIONS = (
    "application_variants",
    "library_variants",
    "feature_variants",
    "test_variants",
    "unit_test_variants",
)


def get_variants(project) -> List:
    """All variants of the project's android extension, deduplicated by identity."""
    android_extension = project.extensions.get_by_name("android")
    variants = {}
    for collection_name in VARIANT_COLLECTIONS:
        for variant in getattr(android_extension, collection_name, None) or ():
            variants.setdefault(id(variant), variant)
    return list(variants.values())


def get_main_compilation_name(project) -> str:
    if not project.is_android_project():
        return MAIN_COMPILATION_NAME

    variants = get_variants(project)
    for variant in variants:
        if variant.name == RELEASE:
            logger.debug(f"Using Android variant '{variant.name}' as the main compilation")
            return variant.name
    names = ", ".join(v.name for v in variants) or "none"
    raise ConfigurationError(
        f"Android project '{project.name}' has no '{RELEASE}' build variant (found: {names})"
    )
