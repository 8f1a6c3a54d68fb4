"""Kotlin plugin shapes: platform types, targets, compilations and the target extensions."""

from enum import Enum
from typing import Iterable, Optional

from .project import FileCollection, NamedObjectCollection, SourceDirectorySet

MAIN_COMPILATION_NAME = "main"


class KotlinPlatformType(Enum):
    COMMON = "common"
    JVM = "jvm"
    JS = "js"
    ANDROID_JVM = "androidJvm"
    NATIVE = "native"

    def __str__(self):
        return self.value


class KotlinSourceSet:
    def __init__(self, name: str, source_dirs: Iterable = ()):
        self.name = name
        self.kotlin = SourceDirectorySet(source_dirs)


class KotlinCompilation:
    def __init__(self, name: str, compile_dependency_files: Optional[FileCollection] = None,
                 source_sets: Iterable[KotlinSourceSet] = ()):
        self.name = name
        self.compile_dependency_files = compile_dependency_files or FileCollection()
        self.all_kotlin_source_sets = list(source_sets)


class KotlinTarget:
    def __init__(self, name: str, platform_type: KotlinPlatformType,
                 compilations: Iterable[KotlinCompilation] = ()):
        self.name = name
        self.platform_type = platform_type
        self.compilations = NamedObjectCollection(compilations, kind="KotlinCompilation")

    def __repr__(self):
        return f"KotlinTarget('{self.name}', {self.platform_type})"


class KotlinSingleTargetExtension:
    """Extension registered by the single-target plugins (kotlin("jvm"), kotlin("js"), ...)."""

    def __init__(self, target: KotlinTarget):
        self.target = target


class KotlinMultiplatformExtension:
    """Extension registered by the multiplatform plugin."""

    def __init__(self, targets: Iterable[KotlinTarget] = ()):
        self.targets = NamedObjectCollection(targets, kind="KotlinTarget")
