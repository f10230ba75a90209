from .indexed_pq import IndexedPriorityQueue, PriorityQueueItem
from .prim import Edge, MST, PrimSolver, solve_mst

__all__ = [
    'IndexedPriorityQueue',
    'PriorityQueueItem',
    'Edge',
    'MST',
    'PrimSolver',
    'solve_mst',
]
