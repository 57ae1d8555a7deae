class PokedexError(Exception):
    """Base for internal errors."""


class CatalogUnavailable(PokedexError):
    """Remote lookup failed: network error, non-success status or malformed payload."""

    def __init__(self, endpoint: str, detail: str):
        super().__init__(f"Catalog request '{endpoint}' failed: {detail}")
        self.endpoint = endpoint
        self.detail = detail


class HydrationError(PokedexError):
    def __init__(self, creature_id: int | str, detail: str = "not found in the catalog"):
        super().__init__(f"Could not build Pokémon #{creature_id}: {detail}")
        self.creature_id = creature_id
        self.detail = detail


class InvalidMoveIndex(PokedexError):
    def __init__(self, index: int, move_count: int):
        super().__init__(f"Invalid move index {index}; choose between 0 and {move_count - 1}." if move_count else f"Invalid move index {index}; this Pokémon has no moves.")
        self.index = index
        self.move_count = move_count


class InvalidItemIndex(PokedexError):
    def __init__(self, index: int, item_count: int):
        super().__init__(f"Invalid item index {index}; choose between 0 and {item_count - 1}." if item_count else f"Invalid item index {index}; the bag is empty.")
        self.index = index
        self.item_count = item_count


class NoActiveBattle(PokedexError):
    pass
