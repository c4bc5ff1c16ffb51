from typing import Dict, Iterable

def normalize_base_path(base_path: str) -> str:
    """Leading slash added, every trailing slash removed.

"//foo" keeps its double slash: it already starts with "/".
"""
    if not base_path:
        return base_path
    if not base_path.startswith("/"):
        base_path = "/" + base_path
    return base_path.rstrip("/")

def normalize_param_name(name: str) -> str:
    if not name.startswith("/"):
        name = "/" + name
    return name

def make_path(base_path: str, name: str) -> str:
    # absolute names ignore the base path
    if name.startswith("/"):
        return name
    return normalize_base_path(base_path) + normalize_param_name(name)

def make_name_to_path_map(base_path: str, names: Iterable[str]) -> Dict[str, str]:
    return {name: make_path(base_path, name) for name in names}
