"""
Background indexing: job model and per-namespace serialized queue.
"""

from mindmenu.core.indexing.models import IndexingJob
from mindmenu.core.indexing.queue import IndexingQueue

__all__ = ["IndexingJob", "IndexingQueue"]
