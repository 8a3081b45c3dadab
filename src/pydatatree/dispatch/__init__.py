"""Dispatch layer.

Turns a dependency map attached to an action into one dependency action per
key, dispatched ahead of the original action.
"""
