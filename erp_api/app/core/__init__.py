"""Cross-cutting infrastructure: configuration, logging, security, errors and storage."""
