from typing import List, Sequence, TypeVar

from ssmps.errors import InvalidArgument

T = TypeVar("T")

# Max number of names accepted by a single GetParameters call.
GET_PARAMETERS_LIMIT = 10

def make_batches(items: Sequence[T], batch_size: int) -> List[List[T]]:
    """Split items into ordered chunks of at most batch_size.

An empty input gives one empty chunk, not zero chunks.
"""
    if batch_size < 1:
        raise InvalidArgument("batch_size must be greater than 0")
    items = list(items)
    batches: List[List[T]] = []
    while batch_size < len(items):
        batches.append(items[:batch_size])
        items = items[batch_size:]
    batches.append(items)
    return batches
