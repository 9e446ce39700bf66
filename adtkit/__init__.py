"""Classic abstract data types and small algorithm exercises.

Lists, queues, stacks, a postfix evaluator, a heap, sets, dictionaries,
binary and n-ary trees, an adjacency-matrix graph, matrices and array helpers.
"""

__version__ = "0.1.0"