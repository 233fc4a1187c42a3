"""Domain service keeping sibling groups densely ordered 1..N."""

from collections.abc import Iterable

from learnpath.domain.common.exceptions import EntityNotFoundError, InvariantViolationError
from learnpath.domain.common.value_objects import SiblingPosition


class OrderIndexOutOfRangeError(InvariantViolationError):
    """Raised when a move targets an index outside 1..N."""

    def __init__(self, new_index: int, group_size: int) -> None:
        super().__init__(
            "SiblingGroup",
            f"target index {new_index} is outside 1..{group_size}",
        )
        self.new_index = new_index
        self.group_size = group_size


class OrderIndexService:
    """
    Stateless domain service for ordering sibling groups.

    A sibling group is passed as the current ``SiblingPosition`` of every
    member. Each operation returns the full next-state mapping
    ``{item_id: order_index}``; callers persist the entries that changed
    (see ``changed_positions``) in a single unit of work.
    """

    @staticmethod
    def append(group: Iterable[SiblingPosition]) -> int:
        """Index for a unit appended to the end of the group."""
        return max((p.order_index for p in group), default=0) + 1

    @staticmethod
    def move(
        group: Iterable[SiblingPosition], item_id: int, new_index: int
    ) -> dict[int, int]:
        """
        Move one member to ``new_index`` and shift the members in between.

        Moving later decrements every other member in ``(old, new]``;
        moving earlier increments every other member in ``[new, old)``.

        Args:
            group: Current positions of every member of the group
            item_id: Member being moved
            new_index: Target index (1-based)

        Returns:
            Mapping of every member id to its next index

        Raises:
            EntityNotFoundError: If the item is not a member of the group
            OrderIndexOutOfRangeError: If new_index is outside 1..N
        """
        positions = {p.item_id: p.order_index for p in group}
        if item_id not in positions:
            raise EntityNotFoundError("SiblingGroupMember", item_id)

        old_index = positions[item_id]
        if new_index == old_index:
            return positions
        if not 1 <= new_index <= len(positions):
            raise OrderIndexOutOfRangeError(new_index, len(positions))

        result: dict[int, int] = {}
        for member_id, index in positions.items():
            if member_id == item_id:
                result[member_id] = new_index
            elif old_index < new_index and old_index < index <= new_index:
                result[member_id] = index - 1
            elif new_index < old_index and new_index <= index < old_index:
                result[member_id] = index + 1
            else:
                result[member_id] = index
        return result

    @staticmethod
    def delete(group: Iterable[SiblingPosition], item_id: int) -> dict[int, int]:
        """
        Remove one member and close the gap it leaves.

        Returns:
            Mapping of every remaining member id to its next index

        Raises:
            EntityNotFoundError: If the item is not a member of the group
        """
        positions = {p.item_id: p.order_index for p in group}
        if item_id not in positions:
            raise EntityNotFoundError("SiblingGroupMember", item_id)

        removed_index = positions.pop(item_id)
        return {
            member_id: index - 1 if index > removed_index else index
            for member_id, index in positions.items()
        }

    @staticmethod
    def changed_positions(
        group: Iterable[SiblingPosition], next_state: dict[int, int]
    ) -> dict[int, int]:
        """Entries of ``next_state`` whose index differs from the current group."""
        current = {p.item_id: p.order_index for p in group}
        return {
            item_id: index
            for item_id, index in next_state.items()
            if current.get(item_id) != index
        }

    @staticmethod
    def is_dense(group: Iterable[SiblingPosition]) -> bool:
        """Check that the group is indexed exactly 1..N."""
        indices = sorted(p.order_index for p in group)
        return indices == list(range(1, len(indices) + 1))
