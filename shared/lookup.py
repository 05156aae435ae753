"""Standard option lists for equipment dropdowns.

These mirror the "Drop Down List" sheet of the site walk spreadsheet that
engineers used before the application existed.
"""

QUICK_CONFIG_OPTIONS = [
    "Single Standard Door Exit Only Interior",
    "Single Mag Exit Only Perimeter",
    "Double Door Standard Exit Only Interior",
    "Double Door Mag Exit Only Perimeter",
    "Double Door Standard Both Sides Interior",
    "Double Door Mag Both Sides Perimeter",
    "Single Door Exit Only w/Card Reader Interior",
    "Single Door Exit Only w/Card Reader Perimeter",
    "Double Door Card Access One Side Interior",
    "Double Door Card Access One Side Perimeter",
    "Double Door Card Access Both Sides Interior",
    "Double Door Card Access Both Sides Perimeter",
]

READER_TYPES = [
    "KR-100",
    "AIO",
    "AIO Mullion",
    "RP40 W/Keypad",
    "RP40",
    "RPK40",
    "CSR-35L",
    "KP-11",
    "KP-12",
]

LOCK_TYPES = [
    "Standard",
    "Single Mag",
    "Double Mag",
    "Single Delayed Egress",
    "Double Delayed Egress",
    "No Lock",
]

MONITORING_TYPES = ["Prop", "Alarmed", "Card Read Only"]

LOCK_PROVIDER_OPTIONS = ["Kastle", "Existing"]

TAKEOVER_OPTIONS = ["Yes", "No"]

INTERIOR_PERIMETER_OPTIONS = ["Interior", "Perimeter"]

YES_NO_OPTIONS = ["Yes", "No", "Combo"]

CAMERA_TYPES = [
    "Dome Indoor",
    "Dome Outdoor",
    "Bullet Indoor",
    "Bullet Outdoor",
    "PTZ Indoor",
    "PTZ Outdoor",
    "Fisheye",
    "Panoramic",
]

MOUNTING_TYPES = ["Ceiling", "Wall", "Corner", "Pole", "Pendant"]

RESOLUTIONS = ["1.3MP", "2MP", "3MP", "4MP", "5MP", "8MP", "12MP"]

ELEVATOR_TYPES = ["Standard", "High-Speed", "Freight", "Destination Dispatch"]

TURNSTILE_TYPES = ["Tripod", "Full-Height", "Optical", "Speed Gate"]

INTERCOM_TYPES = ["IP Video", "IP Audio", "Analog Video", "Analog Audio"]


LOOKUP_DATA = {
    'quickConfigOptions': QUICK_CONFIG_OPTIONS,
    'doorTypes': QUICK_CONFIG_OPTIONS,  # legacy name
    'readerTypes': READER_TYPES,
    'lockTypes': LOCK_TYPES,
    'monitoringTypes': MONITORING_TYPES,
    'securityLevels': MONITORING_TYPES,  # legacy name
    'lockProviderOptions': LOCK_PROVIDER_OPTIONS,
    'ppiOptions': LOCK_PROVIDER_OPTIONS,  # legacy name
    'takeoverOptions': TAKEOVER_OPTIONS,
    'interiorPerimeterOptions': INTERIOR_PERIMETER_OPTIONS,
    'yesNoOptions': YES_NO_OPTIONS,
    'cameraTypes': CAMERA_TYPES,
    'mountingTypes': MOUNTING_TYPES,
    'resolutions': RESOLUTIONS,
    'elevatorTypes': ELEVATOR_TYPES,
    'turnstileTypes': TURNSTILE_TYPES,
    'intercomTypes': INTERCOM_TYPES,
}
