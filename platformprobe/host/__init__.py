from .project import ExtensionContainer, FileCollection, NamedObjectCollection, Project, SourceDirectorySet
from .loader import load_project
