"""Third-generation Pokémon RNG seed recovery, PID/IV generation, data encryption, stats, moves and menu options."""

__version__ = "0.1.0"

__all__ = [
    "generators",
    "lcg",
    "mon_data",
    "moves",
    "options",
    "shiny_generators",
    "stats",
]