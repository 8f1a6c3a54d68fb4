"""
Platform discovery for a host build project.

PlatformResolver exposes one entry point per known project shape. Each one
returns None when its shape is not present on the project, so callers can
try them in turn; resolve() runs that chain in a configurable order.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from .cli_logger import logger
from .errors import ConfigurationError
from .host.java import MAIN_SOURCE_SET_NAME, JavaPluginConvention
from .host.kotlin import KotlinMultiplatformExtension, KotlinPlatformType, KotlinSingleTargetExtension
from .probe import probe
from .utils.compilations import get_classpath, get_source_set
from .utils.file_filter import existing_files
from .utils.platform_names import get_platform_name
from .utils.task_extractor import merge_tasks

COMMON = str(KotlinPlatformType.COMMON)
DEFAULT_STRATEGIES = ("multiplatform", "single", "tasks", "java")


@dataclass(frozen=True)
class PlatformData:
    """Source roots and classpath of one compilation platform."""

    name: Optional[str]
    classpath: Tuple[Path, ...]
    source_roots: Tuple[Path, ...]
    platform: str

    def __post_init__(self):
        object.__setattr__(self, "classpath", tuple(self.classpath))
        object.__setattr__(self, "source_roots", tuple(self.source_roots))

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "platform": self.platform,
            "classpath": [str(p) for p in self.classpath],
            "source_roots": [str(p) for p in self.source_roots],
        }


class PlatformResolver:
    def __init__(self, project):
        self.project = project

    def _target_data(self, target, name: Optional[str]) -> PlatformData:
        return PlatformData(
            name,
            get_classpath(self.project, target),
            get_source_set(self.project, target),
            get_platform_name(target.platform_type),
        )

    def extract_from_single_platform(self) -> Optional[PlatformData]:
        target = probe(lambda: self.project.extensions.get_by_type(KotlinSingleTargetExtension).target)
        if not target:
            logger.debug("No single-target Kotlin extension found")
            return None

        data = probe(self._target_data, target.value, None)
        if not data:
            logger.debug("Single-target Kotlin extension is not compatible with this plugin version")
        return data.value

    def _multi_platform_data(self, targets) -> List[PlatformData]:
        common_target = next((t for t in targets if t.platform_type == KotlinPlatformType.COMMON), None)
        config = [self._target_data(t, t.name) for t in targets if t.platform_type != KotlinPlatformType.COMMON]
        common = PlatformData(
            COMMON,
            get_classpath(self.project, common_target),
            get_source_set(self.project, common_target),
            COMMON,
        )
        return config + [common]

    def extract_from_multi_platform(self) -> Optional[List[PlatformData]]:
        targets = probe(lambda: list(self.project.extensions.get_by_type(KotlinMultiplatformExtension).targets))
        if not targets:
            logger.debug("No multiplatform Kotlin extension found")
            return None

        data = probe(self._multi_platform_data, targets.value)
        if not data:
            logger.debug("Multiplatform Kotlin extension is not compatible with this plugin version")
        return data.value

    def extract_from_kotlin_tasks(self, kotlin_tasks: Iterable) -> Optional[PlatformData]:
        merged = merge_tasks(self.project, kotlin_tasks)
        if merged is None:
            return None
        return PlatformData(None, merged.classpath, merged.source_roots, "")

    def extract_from_java_plugin(self) -> Optional[PlatformData]:
        convention = self.project.convention.find_by_type(JavaPluginConvention)
        if convention is None:
            logger.debug("Java plugin is not applied")
            return None
        main = convention.source_sets.find_by_name(MAIN_SOURCE_SET_NAME)
        if main is None:
            return None
        return PlatformData(None, [], existing_files(main.all_source.src_dirs), "")

    def resolve(self, kotlin_tasks: Optional[Sequence] = None,
                strategies: Sequence[str] = DEFAULT_STRATEGIES) -> List[PlatformData]:
        """
        Run the strategies in order and return the first applicable result.

        Returns an empty list when no strategy applies. ConfigurationError
        from a strategy propagates.
        """
        chain = {
            "multiplatform": self.extract_from_multi_platform,
            "single": self.extract_from_single_platform,
            "tasks": lambda: self.extract_from_kotlin_tasks(kotlin_tasks) if kotlin_tasks else None,
            "java": self.extract_from_java_plugin,
        }
        unknown = [s for s in strategies if s not in chain]
        if unknown:
            raise ConfigurationError(f"Unknown strategies: {', '.join(unknown)}. Known: {', '.join(chain)}")

        for strategy in strategies:
            result = chain[strategy]()
            if result is None:
                continue
            logger.debug(f"Strategy '{strategy}' applies to project '{self.project.name}'")
            return result if isinstance(result, list) else [result]
        logger.debug(f"No strategy applies to project '{self.project.name}'")
        return []
