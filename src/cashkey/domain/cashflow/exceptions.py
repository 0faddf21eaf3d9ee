"""Cash flow domain exceptions."""

from cashkey.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class ItemNotFoundError(EntityNotFoundError):
    """Raised when no income or expense item has the given id."""

    def __init__(self, item_id: str):
        super().__init__(
            f"Cash flow item not found: {item_id}",
            code=ErrorCode.ITEM_NOT_FOUND,
            details={"item_id": item_id},
        )
        self.item_id = item_id
