"""
Sources for the list of API methods the SDK already implements
"""
import importlib
import inspect
import logging
import pkgutil
from pathlib import Path
from typing import List, Union

from lastfm_progress.exceptions import ImplementedSourceError

logger = logging.getLogger(__name__)


def load_implemented_file(path: Union[str, Path]) -> List[str]:
    """Read method names from a text file, one per line

    Blank lines and lines starting with # are ignored.
    """
    methods = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            name = line.strip()
            if not name or name.startswith("#"):
                continue
            methods.append(name)
    logger.debug(f"Loaded {len(methods)} implemented methods from {path}")
    return methods


def _iter_modules(package_name: str):
    package = importlib.import_module(package_name)
    yield package
    # A plain module has no __path__, nothing to walk
    if not hasattr(package, "__path__"):
        return
    names = sorted(info.name for info in pkgutil.walk_packages(package.__path__, prefix=package_name + "."))
    for name in names:
        yield importlib.import_module(name)


def collect_implemented_from_package(package_name: str, attribute: str = "method_name") -> List[str]:
    """Collect API method names declared on the command classes of a package

    Every class defined in the package (or its submodules) with a string
    class attribute named `attribute` contributes that value, e.g.

        class GetAlbumInfoCommand:
            method_name = "album.getInfo"

    Raises:
        ImplementedSourceError: If the package or one of its modules fails to import
    """
    try:
        modules = list(_iter_modules(package_name))
    except Exception as e:
        raise ImplementedSourceError(package_name, e) from e

    methods = []
    seen = set()
    for module in modules:
        for _, cls in inspect.getmembers(module, inspect.isclass):
            # skip classes re-exported from elsewhere, they're picked up in their own module
            if cls.__module__ != module.__name__:
                continue
            value = cls.__dict__.get(attribute)
            if isinstance(value, str) and value and value not in seen:
                seen.add(value)
                methods.append(value)
    logger.debug(f"Collected {len(methods)} implemented methods from {package_name}")
    return methods
