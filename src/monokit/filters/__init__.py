"""Project filtering."""

from monokit.filters.scope import Scope, filter_by_scope

__all__ = ["Scope", "filter_by_scope"]
