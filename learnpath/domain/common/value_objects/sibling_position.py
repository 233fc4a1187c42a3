"""Position of a curriculum unit inside its sibling group."""

from dataclasses import dataclass

from ..value_object import ValueObject


@dataclass(frozen=True)
class SiblingPosition(ValueObject):
    """
    An ``(id, order_index)`` pair for one member of a sibling group.

    Sibling groups are lessons in a module, modules in a course and
    questions in a quiz lesson. The id is the raw integer identifier so
    the same ordering rules apply to every kind of unit.
    """

    item_id: int
    order_index: int
