"""Constants for alarmdecoder_bridge."""

DOMAIN = "alarmdecoder_bridge"

DATA_HUB = "hub"
DATA_VIEW_REGISTERED = "view_registered"

DEFAULT_TITLE = "AlarmDecoder"
DEFAULT_MANUFACTURER = "AlarmDecoder"

NOTIFY_URL = f"/api/{DOMAIN}/notify"
NOTIFY_VIEW_NAME = f"api:{DOMAIN}:notify"


def signal_panel_updated(entry_id: str) -> str:
    """Dispatcher signal carrying a resolved PanelState."""
    return f"{DOMAIN}_{entry_id}_panel_updated"


def signal_zone_updated(entry_id: str, zone_id: str) -> str:
    """Dispatcher signal carrying an encoded zone value."""
    return f"{DOMAIN}_{entry_id}_zone_{zone_id}_updated"
