from pathlib import Path
from typing import List

from .file_filter import existing_files
from .variants import get_main_compilation_name


def get_main_compilation(project, target):
    """
    Return the target's main compilation, or None when there is no target.

    Raises UnknownDomainObjectError when the target has no compilation with
    the main compilation name.
    """
    if target is None:
        return None
    return target.compilations.get_by_name(get_main_compilation_name(project))


def get_classpath(project, target) -> List[Path]:
    compilation = get_main_compilation(project, target)
    if compilation is None:
        return []
    return existing_files(compilation.compile_dependency_files.files)


def get_source_set(project, target) -> List[Path]:
    compilation = get_main_compilation(project, target)
    if compilation is None:
        return []
    return existing_files(
        directory
        for source_set in compilation.all_kotlin_source_sets
        for directory in source_set.kotlin.source_directories
    )
