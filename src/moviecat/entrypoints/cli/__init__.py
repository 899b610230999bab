"""MOVIECAT command-line interface (``moviecat``)."""
