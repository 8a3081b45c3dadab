"""pydatatree - push data between state slices of a reducer pipeline."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pydatatree")
except PackageNotFoundError:
    __version__ = "0+local"
from pydatatree._constants import DATA_TREE_ID
from pydatatree.config import DEFAULT_CONFIG, DataTreeConfig
from pydatatree.dispatch.declarer import setup_tree
from pydatatree.dispatch.extractors import FuncExtractor, PathExtractor
from pydatatree.dispatch.middleware import create_data_dispatch, data_dispatch
from pydatatree.exceptions import DataTreeConfigError, DataTreeError, DataTreeStateError
from pydatatree.paths import resolve_path
from pydatatree.state.actions import Address, DependencyAction, address_for
from pydatatree.state.listener import listen_for

__all__ = [
    "__version__",
    "DATA_TREE_ID",
    "DEFAULT_CONFIG",
    "Address",
    "DataTreeConfig",
    "DataTreeConfigError",
    "DataTreeError",
    "DataTreeStateError",
    "DependencyAction",
    "FuncExtractor",
    "PathExtractor",
    "address_for",
    "create_data_dispatch",
    "data_dispatch",
    "listen_for",
    "resolve_path",
    "setup_tree",
]
