"""
Read-only model of a host build project.

The resolver never builds any of this itself; a host integration (or the
TOML loader in platformprobe.host.loader) hands over a fully configured
Project and the resolver only queries it.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional

from ..errors import ResolveError, UnknownDomainObjectError


class FileCollection:
    """
    Lazily resolved, ordered set of files.

    Resolution happens when `files` is read. Collections that carry
    unresolved dependency coordinates raise ResolveError at that point,
    and so does any union containing them.
    """

    def __init__(self, paths: Iterable = (), unresolved: Iterable[str] = (), parts: Iterable["FileCollection"] = ()):
        self._paths = tuple(Path(p) for p in paths)
        self._unresolved = tuple(unresolved)
        self._parts = tuple(parts)

    @property
    def files(self) -> List[Path]:
        if self._unresolved:
            raise ResolveError(f"Could not resolve dependencies: {', '.join(self._unresolved)}")
        resolved: Dict[Path, None] = {}
        for part in self._parts:
            for f in part.files:
                resolved.setdefault(f, None)
        for p in self._paths:
            resolved.setdefault(p, None)
        return list(resolved)

    def __add__(self, other: "FileCollection") -> "FileCollection":
        if not isinstance(other, FileCollection):
            return NotImplemented
        return FileCollection(parts=(self, other))

    def __iter__(self) -> Iterator[Path]:
        return iter(self.files)

    def __repr__(self):
        return f"FileCollection(paths={list(self._paths)}, unresolved={list(self._unresolved)}, parts={len(self._parts)})"


class SourceDirectorySet:
    """Source directories of one language in one source set."""

    def __init__(self, src_dirs: Iterable = ()):
        self.src_dirs = [Path(d) for d in src_dirs]

    @property
    def source_directories(self) -> FileCollection:
        return FileCollection(self.src_dirs)


class NamedObjectCollection:
    """Ordered collection of objects with a `name` attribute, kept in declaration order."""

    def __init__(self, items: Iterable = (), kind: str = "object"):
        self._items = list(items)
        self.kind = kind

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def names(self) -> List[str]:
        return [item.name for item in self._items]

    def find_by_name(self, name: str) -> Optional[Any]:
        for item in self._items:
            if item.name == name:
                return item
        return None

    def get_by_name(self, name: str) -> Any:
        item = self.find_by_name(name)
        if item is None:
            raise UnknownDomainObjectError(f"{self.kind} with name '{name}' not found.")
        return item


class ExtensionContainer:
    """Extensions registered on a project, addressable by name or by type."""

    def __init__(self, extensions: Optional[Dict[str, Any]] = None):
        self._extensions = dict(extensions or {})

    def __contains__(self, name: str) -> bool:
        return name in self._extensions

    def find_by_name(self, name: str) -> Optional[Any]:
        return self._extensions.get(name)

    def get_by_name(self, name: str) -> Any:
        if name not in self._extensions:
            raise UnknownDomainObjectError(f"Extension with name '{name}' does not exist.")
        return self._extensions[name]

    def find_by_type(self, extension_type: type) -> Optional[Any]:
        for extension in self._extensions.values():
            if isinstance(extension, extension_type):
                return extension
        return None

    def get_by_type(self, extension_type: type) -> Any:
        extension = self.find_by_type(extension_type)
        if extension is None:
            raise UnknownDomainObjectError(f"Extension of type '{extension_type.__name__}' does not exist.")
        return extension


class Project:
    """A configured host project: extensions, plugin conventions and tasks."""

    def __init__(self, name: str, project_dir: Path = Path("."),
                 extensions: Optional[ExtensionContainer] = None,
                 convention: Optional[ExtensionContainer] = None,
                 tasks: Iterable = ()):
        self.name = name
        self.project_dir = Path(project_dir)
        self.extensions = extensions or ExtensionContainer()
        self.convention = convention or ExtensionContainer()
        self.tasks = NamedObjectCollection(tasks, kind="Task")

    def file(self, path) -> Path:
        path = Path(path)
        return path if path.is_absolute() else self.project_dir / path

    def files(self, *paths, unresolved: Iterable[str] = ()) -> FileCollection:
        return FileCollection([self.file(p) for p in paths], unresolved=unresolved)

    def is_android_project(self) -> bool:
        return "android" in self.extensions

    def __repr__(self):
        return f"Project('{self.name}', {self.project_dir})"
