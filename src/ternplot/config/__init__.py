from .loader import ConfigError, load_options, parse_value
from .schema import KeySpec, LINK_FIELDS, SETTINGS_SCHEMA, make_choices_validator, make_shape_validator
from .settings import TernarySettings, load_settings

__all__ = [
	"ConfigError",
	"KeySpec",
	"LINK_FIELDS",
	"SETTINGS_SCHEMA",
	"TernarySettings",
	"load_options",
	"load_settings",
	"make_choices_validator",
	"make_shape_validator",
	"parse_value",
]
