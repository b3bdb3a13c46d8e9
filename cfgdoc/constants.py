"""Static text blocks and default type lists for the configuration reference."""

from __future__ import annotations

CONFIG_HEADER = (
    "# Configuration\n"
    "See [gochan.example.json](examples/configs/gochan.example.json) for an example gochan.json.\n"
    "\n"
    "**Make sure gochan has read-write permission for `DocumentRoot` and `LogDir`"
    " and read permission for `TemplateDir`**\n"
    "\n"
    "Fields in the table marked as board options can be overridden on individual boards"
    " by adding them to  board.json, which gochan looks for in the board directory or in"
    " the same directory as gochan.json.\n"
    "\n"
)

GEOIP_OPTIONS_EXAMPLE = (
    "\nExample options for `GeoIPOptions`:\n"
    "```JSONC\n"
    '"GeoIPType": "mmdb",\n'
    '"GeoIPOptions": {\n'
    '\t"dbLocation": "/usr/share/geoip/GeoIP2.mmdb",\n'
    '\t"isoCode": "en" // optional\n'
    "}\n```\n\n"
)

CUSTOM_FLAGS_EXAMPLE = (
    "`CustomFlags` is an array with custom post flags, selectable via dropdown."
    " The `Flag` value is assumed to be a file in /static/flags/. Example:\n"
    "```JSON\n"
    '"CustomFlags": [\n'
    '\t{"Flag":"california.png", "Name": "California"},\n'
    '\t{"Flag":"cia.png", "Name": "CIA"},\n'
    '\t{"Flag":"lgbtq.png", "Name": "LGBTQ"},\n'
    '\t{"Flag":"ms-dos.png", "Name": "MS-DOS"},\n'
    '\t{"Flag":"stallman.png", "Name": "Stallman"},\n'
    '\t{"Flag":"templeos.png", "Name": "TempleOS"},\n'
    '\t{"Flag":"tux.png", "Name": "Linux"},\n'
    '\t{"Flag":"windows9x.png", "Name": "Windows 9x"}\n'
    "]\n```\n\n"
)

DEFAULT_CONFIG_DIR = "pkg/config"
DEFAULT_AUXILIARY_DIR = "pkg/posting/geoip"

DEFAULT_GROUPED_TYPES: tuple[str, ...] = (
    "SystemCriticalConfig",
    "SQLConfig",
    "SiteConfig",
    "BoardConfig",
    "PostConfig",
    "UploadConfig",
)

DEFAULT_NAMED_TYPES: tuple[str, ...] = (
    "CaptchaConfig",
    "PageBanner",
    "BoardCooldowns",
)

# Types whose settings may be overridden per board in board.json.
DEFAULT_BOARD_TYPES: tuple[str, ...] = (
    "BoardConfig",
    "PostConfig",
    "UploadConfig",
)

DEFAULT_AUXILIARY_TYPE = "Country"
DEFAULT_AUXILIARY_DISPLAY_NAME = "geoip.Country"

DEPRECATION_MARKER = "Deprecated:"


__all__ = [
    "CONFIG_HEADER",
    "CUSTOM_FLAGS_EXAMPLE",
    "DEFAULT_AUXILIARY_DIR",
    "DEFAULT_AUXILIARY_DISPLAY_NAME",
    "DEFAULT_AUXILIARY_TYPE",
    "DEFAULT_BOARD_TYPES",
    "DEFAULT_CONFIG_DIR",
    "DEFAULT_GROUPED_TYPES",
    "DEFAULT_NAMED_TYPES",
    "DEPRECATION_MARKER",
    "GEOIP_OPTIONS_EXAMPLE",
]
