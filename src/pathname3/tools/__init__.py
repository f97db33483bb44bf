from .path_tools import (
    path_info,
    cleanpath,
    join,
    relative_path_from,
    ascend,
    descend,
    compare,
)
from .fs_tools import (
    list_children,
    stat_path,
    read_file,
    find_paths,
)

__all__ = [
    "path_info",
    "cleanpath",
    "join",
    "relative_path_from",
    "ascend",
    "descend",
    "compare",
    "list_children",
    "stat_path",
    "read_file",
    "find_paths",
]
