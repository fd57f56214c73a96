"""
Supporting containers.

- Queue: linked-list FIFO with O(1) enqueue/dequeue
- EMPTY: sentinel returned by Queue.dequeue() on an empty queue
"""

from graphwalk.structures.queue import EMPTY, Queue

__all__ = ["EMPTY", "Queue"]
