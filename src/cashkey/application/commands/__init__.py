"""Item commands.

Each command takes the current state and returns a new one together with
the fragment to write back to the address.
"""

from cashkey.application.commands.add_item_command import AddItemCommand
from cashkey.application.commands.delete_item_command import DeleteItemCommand
from cashkey.application.commands.edit_item_command import EditItemCommand

__all__ = [
    "AddItemCommand",
    "DeleteItemCommand",
    "EditItemCommand",
]
