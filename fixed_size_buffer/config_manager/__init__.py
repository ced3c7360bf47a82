"""Configuration for fixed-size buffers: models, profiles and overrides."""
