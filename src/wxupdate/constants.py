from typing import Final

# Value sent as ``softwaretype`` with every update
SOFTWARE_TYPE: Final = "WeatherDisplay"

# Fixed ``action`` parameter appended to every update
UPDATE_ACTION: Final = "updateraw"

# Columns in one Weather Display log line
LOG_FIELD_COUNT: Final = 17

# Name of the configuration file searched for by default
CONFIG_FILENAME: Final = "WundergroundUpdate.properties"

# Environment variable that points at a configuration file
CONFIG_ENV_VAR: Final = "WXUPDATE_CONFIG"

# Properties files are ISO-8859-1, YAML files UTF-8
PROPERTIES_ENCODING: Final = "latin-1"
YAML_ENCODING: Final = "utf-8"

# Mask shown in place of the station password
REDACTED: Final = "****"
