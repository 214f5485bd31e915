from .errors import MalformedTreeFile
from .serializer import dumps_tree, export_tree_dict, load_tree, loads_tree, read_tree, save_tree, write_tree

__all__ = [
    "MalformedTreeFile",
    "dumps_tree",
    "export_tree_dict",
    "load_tree",
    "loads_tree",
    "read_tree",
    "save_tree",
    "write_tree",
]
