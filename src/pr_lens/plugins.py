"""Registry of plugins exposed to review scripts by instance name."""

import logging
from abc import ABC, abstractmethod

from pr_lens.environment import ReviewEnvironment

logger = logging.getLogger(__name__)

_REGISTRY: dict[str, type["Plugin"]] = {}


class Plugin(ABC):
    """Base class for objects a review script can reach by name."""

    def __init__(self, env: ReviewEnvironment) -> None:
        self.env = env

    @classmethod
    @abstractmethod
    def instance_name(cls) -> str:
        """Name review scripts use to reference the plugin."""


def register_plugin(cls: type[Plugin]) -> type[Plugin]:
    """Add a plugin class to the registry. Usable as a class decorator."""
    name = cls.instance_name()
    existing = _REGISTRY.get(name)
    if existing is not None and existing is not cls:
        raise ValueError(
            f"Plugin name '{name}' already registered by {existing.__qualname__}"
        )
    _REGISTRY[name] = cls
    return cls


def registered_plugins() -> dict[str, type[Plugin]]:
    """Copy of the registry, keyed by instance name."""
    return dict(_REGISTRY)


def load_plugins(env: ReviewEnvironment) -> dict[str, Plugin]:
    """Instantiate every registered plugin for one review run."""
    # Importing the built-in plugins registers them.
    import pr_lens.github  # noqa: F401

    plugins = {name: cls(env) for name, cls in _REGISTRY.items()}
    logger.debug(f"Loaded plugins: {', '.join(sorted(plugins))}")
    return plugins
