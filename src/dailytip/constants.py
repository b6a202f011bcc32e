# topmark:header:start
#
#   project      : DailyTip
#   file         : constants.py
#   file_relpath : src/dailytip/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DailyTip Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DAILYTIP_VERSION: str = get_version("dailytip")

# Package holding the bundled *.json collections
BUNDLED_COLLECTIONS_PACKAGE: str = "dailytip.collections"
COLLECTION_SUFFIX: str = ".json"

# Config discovery
CONFIG_FILE_NAME: str = "dailytip.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "dailytip"

# Environment overrides
COLLECTIONS_DIR_ENV: str = "DAILYTIP_COLLECTIONS_DIR"

# Web bundle output
WEB_DEFAULT_OUTPUT_DIR: str = "dist/public"
WEB_BUNDLE_FILE_NAME: str = "tip-data.js"
WEB_COLLECTIONS_GLOBAL: str = "window.tipCollections"
WEB_TIP_DATA_PREFIX: str = "tipData_"
