"""Cross-cutting pieces: config, logging, errors, validation and the record store."""
