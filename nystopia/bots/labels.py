"""Single-character labels the renderer draws for each bot."""

from __future__ import annotations

LABEL_ALPHABET = (
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz!@#$%^&*()"
)


def label_for(index: int) -> str:
    """Return the label for the ``index``-th bot, cycling the alphabet."""
    return LABEL_ALPHABET[index % len(LABEL_ALPHABET)]
