"""
Classpath and source root extraction from Kotlin compile tasks.

Older Kotlin plugin generations register no target extension, so the only
place their configuration can be read from is the compile tasks. Each
generation exposes the task classpath under a different accessor, and some
return a structured FileCollection while others return plain files:

    1. get_classpath() declared on the base AbstractCompile task
    2. a compile_classpath property declared on AbstractKotlinCompile
    3. get_classpath() declared on AbstractKotlinCompile

The first accessor present on the task that yields a value wins. Source roots have only one
known accessor; a task without it means the whole plugin generation is
unsupported, so extraction over *all* tasks is abandoned.
"""

import inspect
from functools import reduce
from pathlib import Path
from typing import Iterable, List, NamedTuple, Optional, Tuple

from ..cli_logger import logger
from ..errors import ApiIncompatibilityError, ResolveError
from ..host.project import FileCollection
from ..probe import UNAVAILABLE, ProbeResult, probe
from .file_filter import existing_files

UPGRADE_ADVISORY = "Cannot extract sources from Kotlin tasks! Consider upgrading Kotlin Gradle Plugin"

BASE_COMPILE_CLASS_NAME = "AbstractCompile"
KOTLIN_COMPILE_CLASS_NAME = "AbstractKotlinCompile"


class TaskAccumulator(NamedTuple):
    structured: FileCollection
    plain: Tuple[Path, ...]
    source_roots: Tuple[Path, ...]


class MergedTaskData(NamedTuple):
    classpath: List[Path]
    source_roots: List[Path]


def find_task_class(task, class_name: str) -> Optional[type]:
    """First class in the task's MRO with the given name, matched by name across plugin generations."""
    for cls in type(task).__mro__:
        if cls.__name__ == class_name:
            return cls
    return None


def abstract_kotlin_compile_for(task) -> Optional[type]:
    return find_task_class(task, KOTLIN_COMPILE_CLASS_NAME)


def get_source_roots(task) -> List:
    container = getattr(task, "source_roots_container", None)
    source_roots = getattr(container, "source_roots", None)
    if source_roots is None:
        raise ApiIncompatibilityError(f"Task '{getattr(task, 'name', task)}' exposes no source roots")
    return list(source_roots)


def _declared_method(cls: Optional[type], name: str):
    if cls is None:
        return None
    member = inspect.getattr_static(cls, name, None)
    return member if inspect.isfunction(member) else None


def _declared_property(cls: Optional[type], name: str):
    if cls is None:
        return None
    member = inspect.getattr_static(cls, name, None)
    return member if isinstance(member, property) else None


def _base_classpath(task, kotlin_compile: type) -> ProbeResult:
    method = _declared_method(find_task_class(task, BASE_COMPILE_CLASS_NAME), "get_classpath")
    return probe(method, task) if method else UNAVAILABLE


def _compile_classpath_property(task, kotlin_compile: type) -> ProbeResult:
    prop = _declared_property(kotlin_compile, "compile_classpath")
    return probe(prop.__get__, task) if prop else UNAVAILABLE


def _kotlin_classpath(task, kotlin_compile: type) -> ProbeResult:
    method = _declared_method(kotlin_compile, "get_classpath")
    return probe(method, task) if method else UNAVAILABLE


CLASSPATH_ACCESSORS = (
    _base_classpath,
    _compile_classpath_property,
    _kotlin_classpath,
)


def get_task_classpath(task, kotlin_compile: type) -> ProbeResult:
    for accessor in CLASSPATH_ACCESSORS:
        result = accessor(task, kotlin_compile)
        if result and result.value is not None:
            return result
    return UNAVAILABLE


def _union(existing: Tuple[Path, ...], new: Iterable) -> Tuple[Path, ...]:
    return tuple(dict.fromkeys((*existing, *(Path(p) for p in new))))


def _merge_task(accumulator: TaskAccumulator, task) -> TaskAccumulator:
    source_roots = get_source_roots(task)
    kotlin_compile = abstract_kotlin_compile_for(task)
    if kotlin_compile is None:
        raise ApiIncompatibilityError(f"Task '{getattr(task, 'name', task)}' is not a Kotlin compile task")

    structured, plain = accumulator.structured, accumulator.plain
    classpath = get_task_classpath(task, kotlin_compile)
    if not classpath:
        logger.debug(f"Task '{getattr(task, 'name', task)}' exposes no known classpath accessor")
    elif isinstance(classpath.value, FileCollection):
        structured = structured + classpath.value
    else:
        plain = _union(plain, classpath.value)

    return TaskAccumulator(
        structured=structured,
        plain=plain,
        source_roots=_union(accumulator.source_roots, existing_files(source_roots)),
    )


def merge_tasks(project, tasks: Iterable) -> Optional[MergedTaskData]:
    """
    Merge classpath and source roots of all tasks into one result.

    Returns None when any task lacks the source root accessor. Structured
    classpath collections that fail to resolve contribute nothing.
    """
    try:
        accumulator = reduce(_merge_task, tasks, TaskAccumulator(project.files(), (), ()))
    except ApiIncompatibilityError as e:
        logger.debug(str(e))
        logger.warning(UPGRADE_ADVISORY)
        return None

    try:
        structured_files = accumulator.structured.files
    except ResolveError as e:
        logger.debug(f"Dropping unresolvable task classpath: {e}")
        structured_files = []

    classpath = existing_files([*structured_files, *project.files(*accumulator.plain).files])
    return MergedTaskData(classpath=classpath, source_roots=list(accumulator.source_roots))
