"""Core comparison engine, settings, and theming."""
