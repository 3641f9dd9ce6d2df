"""A small chess game: pieces, a board with check detection, click-driven game state and a Tkinter window."""

__version__ = "0.1.0"
__all__ = ["pieces", "echiquier", "partie", "interface"]