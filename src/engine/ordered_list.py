"""
Ordered list engine - Drag-style reordering of named blocks

Pure functions only: no state, no I/O. The preview surface resolves a finished
gesture to a (source, target) pair and hands it here; raw pointer motion never
reaches this module.
"""

from typing import Hashable, Sequence, Tuple, TypeVar

from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.ORDER)

T = TypeVar("T", bound=Hashable)


def reorder(sequence: Sequence[T], source_id: T, target_id: T) -> Tuple[T, ...]:
    """
    Move source_id to the slot held by target_id

    The target's index is read from the incoming sequence, then the source is
    spliced out and reinserted at that index. Moving down therefore lands the
    source just after the target, moving up lands it just before:

        reorder(("email", "sms", "social", "passkey", "external"), "sms", "passkey")
        # ("email", "social", "passkey", "sms", "external")

    Identity moves and ids missing from the sequence return it unchanged.

    Args:
        sequence: Current order (a permutation of the block set)
        source_id: Dragged block
        target_id: Block it was dropped on

    Returns:
        New order as a tuple (same members, same length)
    """
    items = tuple(sequence)
    if source_id == target_id or source_id not in items or target_id not in items:
        log.debug("Reorder ignored", source=_label(source_id), target=_label(target_id))
        return items

    old_index = items.index(source_id)
    new_index = items.index(target_id)

    moved = list(items)
    moved.pop(old_index)
    moved.insert(new_index, items[old_index])
    return tuple(moved)


def is_permutation(sequence: Sequence[T], members: Sequence[T]) -> bool:
    """True if sequence holds every member exactly once and nothing else"""
    return len(sequence) == len(members) and set(sequence) == set(members) and len(set(sequence)) == len(sequence)


def _label(item) -> str:
    return str(getattr(item, "value", item))
