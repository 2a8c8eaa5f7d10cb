"""Constants for the SmartForce integration."""

from homeassistant.const import Platform

DOMAIN = "smartforce"

# Platforms
PLATFORMS = [Platform.BINARY_SENSOR, Platform.FAN, Platform.SENSOR]

# Config entry keys
CONF_SCAN_INTERVAL = "scan_interval"

DEFAULT_SCAN_INTERVAL = 30  # seconds between status polls
MIN_SCAN_INTERVAL = 10
MAX_SCAN_INTERVAL = 3600

REQUEST_TIMEOUT = 10  # seconds

MANUFACTURER = "Rowenta"
MODEL = "Smart Force Cyclonic Connect"

# Device modes reported by /status
MODE_READY = "ready"
MODE_CLEANING = "cleaning"
MODE_GO_HOME = "go_home"

# Charging values reported by /status
CHARGING_UNCONNECTED = "unconnected"
CHARGING_CONNECTED = "connected"
CHARGING_CHARGING = "charging"

# Rotation speeds exposed to the fan entity
ROTATION_SPEED_STOPPED = 0
ROTATION_SPEED_ECO = 33
ROTATION_SPEED_STANDARD = 66
ROTATION_SPEED_BOOST = 100

LOW_BATTERY_THRESHOLD = 20
