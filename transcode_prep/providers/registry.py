"""
Provider registry.

A ProviderRegistry maps provider names to factories. It is an ordinary
value: build one at startup, register the providers you want, and pass it
to whatever needs to look providers up.

Installed packages can contribute providers through the
"transcode_prep.providers" entry point group; each entry point names a
provider factory. from_entry_points() builds a registry from them.
"""
import logging
from importlib.metadata import entry_points
from typing import Dict, List, Optional

from transcode_prep.config import Settings
from transcode_prep.providers.provider import (
    Description,
    Factory,
    Health,
    ProviderAlreadyRegistered,
    ProviderNotFound,
)

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = 'transcode_prep.providers'


class ProviderRegistry:
    """
    Named provider factories.

    Examples:
        >>> registry = ProviderRegistry()
        >>> registry.register('fake', FakeProvider.factory())
        >>> registry.list(Settings())
        ['fake']
        >>> registry.describe('fake', Settings()).enabled
        True
    """

    def __init__(self):
        self._factories: Dict[str, Factory] = {}

    @classmethod
    def from_entry_points(cls, group: str = ENTRY_POINT_GROUP) -> 'ProviderRegistry':
        """
        Build a registry from the provider factories installed under group.

        Entry points that fail to load are logged and skipped. When two
        share a name the first one wins.
        """
        registry = cls()
        for ep in entry_points(group=group):
            if ep.name in registry:
                logger.warning("Provider %s is registered twice, ignoring %s", ep.name, ep.value)
                continue
            try:
                factory = ep.load()
            except Exception as e:
                logger.warning("Failed to load provider %s: %s", ep.name, e)
                continue
            registry.register(ep.name, factory)
            logger.debug("Loaded provider %s from %s", ep.name, ep.value)
        return registry

    def __contains__(self, name: str) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def register(self, name: str, factory: Factory) -> None:
        """
        Register factory under name.

        Raises:
            ProviderAlreadyRegistered: If name is already taken
        """
        if name in self._factories:
            raise ProviderAlreadyRegistered(name)
        self._factories[name] = factory

    def get_factory(self, name: str) -> Factory:
        """
        Return the factory registered under name.

        Raises:
            ProviderNotFound: If nothing is registered under name
        """
        try:
            return self._factories[name]
        except KeyError:
            raise ProviderNotFound(name) from None

    def list(self, settings: Optional[Settings] = None) -> List[str]:
        """Return the names of providers that can be built, alphabetically."""
        names = []
        for name, factory in self._factories.items():
            try:
                factory(settings)
            except Exception as e:
                logger.warning("Provider %s is unavailable: %s", name, e)
                continue
            names.append(name)
        return sorted(names)

    def describe(self, name: str, settings: Optional[Settings] = None) -> Description:
        """
        Describe the provider registered under name.

        A provider whose factory fails is reported as disabled. Otherwise
        the description carries its capabilities and current health.

        Raises:
            ProviderNotFound: If nothing is registered under name
        """
        factory = self.get_factory(name)
        description = Description(name=name)
        try:
            provider = factory(settings)
        except Exception as e:
            logger.warning("Provider %s is unavailable: %s", name, e)
            return description

        description.enabled = True
        description.capabilities = provider.capabilities()
        try:
            provider.healthcheck()
        except Exception as e:
            description.health = Health(ok=False, message=str(e))
        else:
            description.health = Health(ok=True)
        return description
