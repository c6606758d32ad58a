"""LSP message models."""
