"""Face image preprocessing, configuration, safetensors weight storage and an AdamW optimiser."""

__version__ = "0.1.0"