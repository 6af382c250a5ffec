"""
Database layer for magic-mongo.

Structure:
- document.py: MagicDocument base model and the model <-> document mapping
- collection.py: MagicCollection and MagicCursor
- database.py: MagicDatabase, the registry of loaded collections
- client.py: MagicMongo, owner of the MongoClient
- single.py / multi.py: SingleMongo and MultiMongo
"""

from .client import MagicMongo
from .collection import MagicCollection, MagicCursor
from .database import MagicDatabase
from .document import DocumentMapper, MagicDocument
from .multi import MultiMongo
from .single import SingleMongo

__all__ = [
    "DocumentMapper",
    "MagicCollection",
    "MagicCursor",
    "MagicDatabase",
    "MagicDocument",
    "MagicMongo",
    "MultiMongo",
    "SingleMongo",
]
