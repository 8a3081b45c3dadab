"""Internal constants shared across the library."""

#: Marker field set to ``True`` only on synthesized dependency actions.
DATA_TREE_ID = "@@dataTree/dependency"

#: Reserved address namespace for dependency actions (``"dataTree.<key>"``).
DEFAULT_NAMESPACE = "dataTree"

#: State region that receives dependency payloads.
DEFAULT_ENTITIES_KEY = "entities"

# Where the middleware looks for a dependency map: ``action[meta][deps]``.
DEFAULT_META_KEY = "meta"
DEFAULT_DEPS_KEY = "deps"

NAMESPACE_SEPARATOR = "."
