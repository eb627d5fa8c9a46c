"""Configuration module for SSH Runner."""

from ssh_runner.config.settings import Settings

__all__ = ["Settings"]
