"""
Builders for MongoDB bson documents.

Each module pairs a set of small helper functions, which return plain
documents, with a builder class that accumulates them:

- filters: FilterBuilder and query operators (eq, gt, and_, or_, ...)
- sorts: SortBuilder and ascending/descending/order_by
- projections: ProjectionBuilder and include/exclude/fields
- indexes: IndexBuilder and index key helpers
- updates: UpdateBuilder and update operators (set_, inc, push, ...)

The helper modules are imported as namespaces, e.g.
``from magic_mongo.builders import filters`` then ``filters.eq("name", "x")``.
"""

from . import filters, indexes, projections, sorts, updates
from .base import Bson, MongoBsonBuilder, resolve_bson
from .filters import FilterBuilder
from .indexes import IndexBuilder
from .projections import ProjectionBuilder
from .sorts import SortBuilder
from .updates import UpdateBuilder

__all__ = [
    "Bson",
    "FilterBuilder",
    "IndexBuilder",
    "MongoBsonBuilder",
    "ProjectionBuilder",
    "SortBuilder",
    "UpdateBuilder",
    "filters",
    "indexes",
    "projections",
    "resolve_bson",
    "sorts",
    "updates",
]
