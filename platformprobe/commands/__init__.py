from .discover import discover
from .config import config
from .log import log
from .version import version
