"""Configuration package: persisted TOML config, derived settings and paths."""
