"""Cross‑cutting infrastructure: settings, logging, errors, security and storage."""
