"""Tag numbers for compact filtering on the ``tags`` field."""

from enum import IntEnum

from .errors import NegativeIDError
from .options import _is_int


class TagType(IntEnum):
    """IGDB object type IDs used in tag numbers."""
    THEME = 0
    GENRE = 1
    KEYWORD = 2
    GAME = 3
    PERSPECTIVE = 4


def generate_tag(tag_type: TagType, object_id: int) -> int:
    """Return the tag number addressing ``object_id`` of the given type."""
    if tag_type < 0 or not _is_int(object_id) or object_id < 0:
        raise NegativeIDError(field="object_id", value=object_id)
    return (int(tag_type) << 28) | object_id
