"""Constants for oslicense."""

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 2

# OSI license API, see
# https://github.com/OpenSourceOrg/api/blob/master/doc/endpoints.md
API_ROOT = "https://api.opensource.org/"
API_LICENSE_PATH = "license/"
API_LICENSES_PATH = "licenses/"

# Raw plain-text license mirror, addressed by license ID
TEXT_ROOT = (
    "https://raw.githubusercontent.com/OpenSourceOrg/licenses/master/texts/plain/"
)

# Seconds before an HTTP request is abandoned
DEFAULT_TIMEOUT = 30.0

DEFAULT_OUTPUT_FILENAME = "LICENSE.md"

# Manifest files checked in each directory, in order
DEFAULT_MANIFEST_NAMES = ["package.json", "pyproject.toml"]

FILL_IN_REMINDER = "Don't forget to fill in the blanks!"
