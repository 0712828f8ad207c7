"""Platform-independent pieces: errors, logging, card model and codecs."""
