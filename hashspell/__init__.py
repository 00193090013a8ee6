"""hashspell: batch spell checker over an open-addressing hash table."""

__version__ = "0.1.0"
