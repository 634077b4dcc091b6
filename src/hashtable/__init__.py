from hashtable.exception import UpdateSourceError
from hashtable.table import Hash, from_pairs, h

__all__ = ("Hash", "UpdateSourceError", "from_pairs", "h")
