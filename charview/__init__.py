"""Character browser for the Rick and Morty API."""
