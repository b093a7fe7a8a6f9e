from pathlib import Path
from typing import Final

DEFAULT_DATA_DIR = (Path(__file__).parent.parent.resolve() / "data").absolute().resolve()

# Input files (relative to the data dir)
AUTOMATED_TOOLS_FILE: Final[str] = "tools-automated.json"
MANUAL_TOOLS_FILE: Final[str] = "tools-manual.json"
TOOLS_IGNORE_FILE: Final[str] = "tools-ignore.json"

# Generated artifacts
TOOLS_OUTPUT_FILE: Final[str] = "tools.json"
TAGS_OUTPUT_FILE: Final[str] = "all-tags.json"
IGNORED_OUTPUT_FILE: Final[str] = "tools-ignored.json"

# Source label used in validation diagnostics for manual entries
MANUAL_TOOLS_SOURCE: Final[str] = "manual-tools.json"

# Fuzzy tag matching: 0.0 requires a perfect match, 1.0 matches anything
FUZZY_MATCH_THRESHOLD: Final[float] = 0.39

# Colors assigned to tags that are not in the curated lists yet
NEW_LANGUAGE_COLOR: Final[str] = "bg-[#57f281]"
NEW_LANGUAGE_BORDER_COLOR: Final[str] = "border-[#37f069]"
NEW_TECHNOLOGY_COLOR: Final[str] = "bg-[#61d0f2]"
NEW_TECHNOLOGY_BORDER_COLOR: Final[str] = "border-[#40ccf7]"

# Repositories under this prefix are owned by the organization
ORG_REPO_PREFIX: Final[str] = "https://github.com/asyncapi/"

IGNORED_AUDIT_DESCRIPTION: Final[str] = (
    "Auto-generated audit log of tools ignored during the last combine run."
)
