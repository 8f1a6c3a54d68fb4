"""Generic compiled-language (java) plugin convention."""

from typing import Iterable

from .project import NamedObjectCollection, SourceDirectorySet

MAIN_SOURCE_SET_NAME = "main"


class JavaSourceSet:
    def __init__(self, name: str, src_dirs: Iterable = ()):
        self.name = name
        self.all_source = SourceDirectorySet(src_dirs)


class JavaPluginConvention:
    def __init__(self, source_sets: Iterable[JavaSourceSet] = ()):
        self.source_sets = NamedObjectCollection(source_sets, kind="SourceSet")
