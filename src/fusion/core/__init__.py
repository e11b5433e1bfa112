"""FUSION core: IR types, expression language, errors, and configuration."""
