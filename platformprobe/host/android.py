"""Android plugin extension shapes and their build variants."""

from typing import Iterable

RELEASE = "release"
DEBUG = "debug"


class BaseVariant:
    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"BaseVariant('{self.name}')"


def _variants(names: Iterable[str]):
    return [BaseVariant(name) for name in names]


class BaseExtension:
    pass


class TestedExtension(BaseExtension):
    def __init__(self, test_variants: Iterable[str] = (), unit_test_variants: Iterable[str] = ()):
        self.test_variants = _variants(test_variants)
        self.unit_test_variants = _variants(unit_test_variants)


class AppExtension(TestedExtension):
    def __init__(self, application_variants: Iterable[str] = (), **kwargs):
        super().__init__(**kwargs)
        self.application_variants = _variants(application_variants)


class LibraryExtension(TestedExtension):
    def __init__(self, library_variants: Iterable[str] = (), **kwargs):
        super().__init__(**kwargs)
        self.library_variants = _variants(library_variants)


class FeatureExtension(LibraryExtension):
    def __init__(self, feature_variants: Iterable[str] = (), **kwargs):
        super().__init__(**kwargs)
        self.feature_variants = _variants(feature_variants)


class TestExtension(BaseExtension):
    # not a test case; pytest would otherwise collect it from test modules
    __test__ = False

    def __init__(self, application_variants: Iterable[str] = ()):
        self.application_variants = _variants(application_variants)
