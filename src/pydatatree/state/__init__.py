"""State/listener layer.

This package owns the satisfaction action type and the only code allowed to
merge a dependency payload into a reducer's state slice.
"""
