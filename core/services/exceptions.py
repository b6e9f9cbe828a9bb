from __future__ import annotations


class ChainNotFoundError(LookupError):
    """
    Raised when a network id is not part of the loaded chain registry table.
    """

    def __init__(self, network_id: int):
        self.network_id = network_id
        super().__init__(f"Chain {network_id} is not configured")
