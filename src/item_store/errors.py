"""Base exception for the item store.

Concrete errors live next to the port that raises them:
    - ports/inbound: ItemNotFoundError
    - ports/outbound: PersistenceError
"""


class ItemStoreError(Exception):
    """Base class for all item store errors."""
