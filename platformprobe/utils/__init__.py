from .file_filter import existing_files
from .platform_names import get_platform_name
from .variants import get_main_compilation_name, get_variants
from .compilations import get_classpath, get_main_compilation, get_source_set
from .task_extractor import merge_tasks
