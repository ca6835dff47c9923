"""Build property publishing."""

from collections.abc import MutableMapping

from commitstamp.core.feedback import UserFeedback


def publish_property(
    properties: MutableMapping[str, str],
    name: str | None,
    value: str,
    feedback: UserFeedback,
) -> bool:
    """Set properties[name] to value, overwriting any previous entry.

    Args:
        properties: Build property map owned by the caller
        name: Property key; must be non-empty
        value: Value to store
        feedback: Receives the configuration error when name is empty

    Returns:
        True if the property was written, False if the name was missing
    """
    if not name:
        feedback.error(
            "Error: If 'property_update' is enabled, 'property_name' must be a valid name."
        )
        return False

    properties[name] = value
    feedback.debug(f"[{name}]: {value}")
    return True
