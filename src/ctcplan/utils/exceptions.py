"""Custom exceptions for ctcplan."""

from __future__ import annotations


class CtcPlanError(Exception):
    """Base exception for ctcplan."""


class ConfigError(CtcPlanError):
    """Invalid configuration."""


class PolicyError(ConfigError):
    """Tax policy file could not be loaded or validated."""
