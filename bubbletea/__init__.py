"""Building blocks for Elm-style terminal user interfaces: models and messages, key and mouse input decoding, timing commands, cancellable readers and terminal handling."""

__version__ = "0.17.0"