"""Card image search backed by Scryfall."""
