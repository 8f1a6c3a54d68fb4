"""Compile task shapes as exposed by current Kotlin plugin generations."""

from typing import Iterable, List


class SourceRootsContainer:
    def __init__(self, source_roots: Iterable = ()):
        self.source_roots: List = list(source_roots)


class AbstractCompile:
    """Base compile task: the classpath is read through get_classpath()."""

    def __init__(self, name: str, classpath=()):
        self.name = name
        self.classpath = classpath

    def get_classpath(self):
        return self.classpath


class AbstractKotlinCompile(AbstractCompile):
    def __init__(self, name: str, source_roots: Iterable = (), classpath=()):
        super().__init__(name, classpath)
        self.source_roots_container = SourceRootsContainer(source_roots)


class KotlinCompile(AbstractKotlinCompile):
    def __repr__(self):
        return f"KotlinCompile('{self.name}')"
