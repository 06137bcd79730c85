"""Identity provider configuration and the default/override merge"""

from dataclasses import dataclass, fields, replace
from typing import Optional


@dataclass(frozen=True)
class ProviderConfig:
    """
    Connection settings for the identity provider.

    Attributes:
        domain: Base URL of the provider (e.g., https://cms.example.com/api).
            None means "not supplied" and leaves any default in place.
    """

    domain: Optional[str] = None


def merge_config(
    default: Optional[ProviderConfig], override: Optional[ProviderConfig]
) -> ProviderConfig:
    """
    Shallow-merge a call-site config over the process-wide default.

    Every field set on ``override`` (anything other than None) wins over the
    same field on ``default``. Neither argument is modified.

    Args:
        default: Process-wide configuration (may be None)
        override: Caller-supplied configuration (may be None)

    Returns:
        New ProviderConfig with the combined values
    """
    merged = default or ProviderConfig()
    if override is None:
        return merged

    changes = {
        f.name: getattr(override, f.name)
        for f in fields(override)
        if getattr(override, f.name) is not None
    }
    return replace(merged, **changes)
