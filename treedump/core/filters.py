"""
Filter predicates shared by the tree pass and the content pass.

Both passes go through `is_visible` so a path is either shown everywhere
or nowhere.
"""

from treedump.core.model import ExclusionMode


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def file_extension(name: str) -> str:
    """Text after the final dot, or '' when the name has none."""
    head, dot, ext = name.rpartition(".")
    return ext if dot else ""


def is_excluded_folder(rel_path: str, config) -> bool:
    if config.exclusion_mode == ExclusionMode.SEGMENT:
        segments = rel_path.split("/")
        return any(p and p in segments for p in config.excluded_folders)
    return any(p and p in rel_path for p in config.excluded_folders)


def is_allowed_file(name: str, config) -> bool:
    if not config.allowed_extensions:
        return True
    return file_extension(name) in config.allowed_extensions


def is_visible(rel_path: str, is_dir: bool, config, check_extension: bool = True) -> bool:
    name = rel_path.rsplit("/", 1)[-1]
    if is_hidden(name) or is_excluded_folder(rel_path, config):
        return False
    if not is_dir and check_extension:
        return is_allowed_file(name, config)
    return True
