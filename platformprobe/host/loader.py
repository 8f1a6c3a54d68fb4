"""
Build a host Project from the [host] tables of a platformprobe.toml file.

This lets the resolver run against a project description exported from a
build tool, without the build tool itself being present.
"""

from pathlib import Path
from typing import Any, Dict, List

from ..cli_logger import logger
from ..errors import ProjectDescriptionError
from .android import AppExtension, FeatureExtension, LibraryExtension, TestExtension
from .java import JavaPluginConvention, JavaSourceSet
from .kotlin import (
    MAIN_COMPILATION_NAME,
    KotlinCompilation,
    KotlinMultiplatformExtension,
    KotlinPlatformType,
    KotlinSingleTargetExtension,
    KotlinSourceSet,
    KotlinTarget,
)
from .project import ExtensionContainer, FileCollection, Project
from .tasks import KotlinCompile

ANDROID_KINDS = {
    "application": lambda d: AppExtension(
        application_variants=d.get("variants", []),
        test_variants=d.get("test_variants", []),
        unit_test_variants=d.get("unit_test_variants", []),
    ),
    "library": lambda d: LibraryExtension(
        library_variants=d.get("variants", []),
        test_variants=d.get("test_variants", []),
        unit_test_variants=d.get("unit_test_variants", []),
    ),
    "feature": lambda d: FeatureExtension(
        library_variants=d.get("variants", []),
        feature_variants=d.get("feature_variants", []),
        test_variants=d.get("test_variants", []),
        unit_test_variants=d.get("unit_test_variants", []),
    ),
    "test": lambda d: TestExtension(application_variants=d.get("variants", [])),
}


def _string_list(table: Dict[str, Any], key: str) -> List[str]:
    value = table.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ProjectDescriptionError(f"'{key}' must be a list of strings, got {value!r}")
    return value


def _platform_type(value: str) -> KotlinPlatformType:
    try:
        return KotlinPlatformType(value)
    except ValueError:
        known = ", ".join(str(p) for p in KotlinPlatformType)
        raise ProjectDescriptionError(f"Unknown platform type '{value}'. Known platform types: {known}")


def _compilation(project: Project, table: Dict[str, Any]) -> KotlinCompilation:
    name = table.get("name", MAIN_COMPILATION_NAME)
    dependency_files = project.files(
        *_string_list(table, "dependency_files"),
        unresolved=_string_list(table, "unresolved_dependencies"),
    )
    source_set = KotlinSourceSet(name, [project.file(d) for d in _string_list(table, "source_dirs")])
    return KotlinCompilation(name, dependency_files, [source_set])


def _target(project: Project, table: Dict[str, Any]) -> KotlinTarget:
    if "name" not in table or "platform" not in table:
        raise ProjectDescriptionError(f"A target needs both 'name' and 'platform': {table!r}")
    compilations = [_compilation(project, c) for c in table.get("compilations", [])]
    return KotlinTarget(table["name"], _platform_type(table["platform"]), compilations)


def _task(project: Project, table: Dict[str, Any]) -> KotlinCompile:
    classpath = [project.file(p) for p in _string_list(table, "classpath")]
    if table.get("lazy", False):
        classpath = FileCollection(classpath, unresolved=_string_list(table, "unresolved_dependencies"))
    source_roots = [project.file(p) for p in _string_list(table, "source_roots")]
    return KotlinCompile(table.get("name", "compileKotlin"), source_roots, classpath)


def load_project(conf: Dict[str, Any], project_dir=".") -> Project:
    """Build a Project from a loaded configuration dictionary."""
    host = conf.get("host", {})
    name = conf.get("project", {}).get("name", Path(project_dir).resolve().name)
    project = Project(name, Path(project_dir))

    extensions = {}
    kotlin = host.get("kotlin", {})
    if "multiplatform" in kotlin:
        targets = [_target(project, t) for t in kotlin["multiplatform"].get("targets", [])]
        extensions["kotlin"] = KotlinMultiplatformExtension(targets)
        logger.debug(f"Loaded multiplatform extension with targets: {[t.name for t in targets]}")
    elif "single" in kotlin:
        extensions["kotlin"] = KotlinSingleTargetExtension(_target(project, kotlin["single"].get("target", {})))
        logger.debug("Loaded single-target extension")

    if "android" in host:
        android = host["android"]
        kind = android.get("kind", "application")
        if kind not in ANDROID_KINDS:
            raise ProjectDescriptionError(
                f"Unknown android kind '{kind}'. Supported kinds are: {', '.join(ANDROID_KINDS)}"
            )
        extensions["android"] = ANDROID_KINDS[kind](android)

    conventions = {}
    if "java" in host:
        source_sets = host["java"].get("source_sets", {})
        conventions["java"] = JavaPluginConvention(
            JavaSourceSet(set_name, [project.file(d) for d in _string_list(source_sets, set_name)])
            for set_name in source_sets
        )

    tasks = [_task(project, t) for t in host.get("tasks", [])]
    # the first Project only served path resolution
    return Project(name, project.project_dir, ExtensionContainer(extensions), ExtensionContainer(conventions), tasks)
