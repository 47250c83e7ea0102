"""
Host page integration.

Registers the resolver on a host-provided global object under a well-known
name so host scripts can call it without importing garten. Without a host
object (server or test context) the namespace is only returned.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Callable, Optional

from garten.config import HOST_GLOBAL_NAME
from garten.logger import logger
from garten.resolver import GartenConfig, resolve_config, resolve_season_accent


@dataclass(frozen=True)
class OshineyeConfig:
    """Namespace published to the host, using host-script naming."""
    getGartenConfig: Callable[..., GartenConfig]
    getSeasonAccent: Callable[..., str]


def expose(host: Optional[Any] = None, name: str = HOST_GLOBAL_NAME) -> OshineyeConfig:
    """
    Build the host namespace and register it on the host global, if any.

    Args:
        host: Global object (attribute target) or mapping (key target); None skips registration
        name: Attribute or key to register under

    Returns:
        The OshineyeConfig namespace
    """
    namespace = OshineyeConfig(
        getGartenConfig=resolve_config,
        getSeasonAccent=resolve_season_accent,
    )

    if host is None:
        logger.debug("No host global object, skipping registration")
        return namespace

    if isinstance(host, MutableMapping):
        host[name] = namespace
    else:
        setattr(host, name, namespace)

    logger.info(f"Registered {name} on host {type(host).__name__}")
    return namespace
