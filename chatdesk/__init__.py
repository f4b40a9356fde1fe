"""Parts of a customer-service chat desk: response envelopes, schemas, validation, storage and migration."""

__version__ = "0.1.0"