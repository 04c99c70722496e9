"""Server‑rendered HTML pages."""
