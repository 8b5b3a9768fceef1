"""Configuration management for the mouse relay."""

from mouse_relay.config.envfile import load_environment_file
from mouse_relay.config.loader import Config, load_config

__all__ = ["Config", "load_config", "load_environment_file"]
