"""
Domain Constants: placeholders and defaults shared across golden_files.

Placeholder strings are part of the golden file format: changing any of them
invalidates every golden file written so far.
"""

# =============================================================================
# Placeholders
# =============================================================================

# printf-style pattern; sequence numbers start at 1
UUID_PLACEHOLDER_PATTERN = "00000000-0000-0000-0000-%012d"

RFC3339_PLACEHOLDER = "0001-01-01T00:00:00Z"
RFC7232_PLACEHOLDER = "Mon, 01 Jan 0001 00:00:00 GMT"

# =============================================================================
# Serialization
# =============================================================================

JSON_INDENT = 2

# =============================================================================
# Reference Store
# =============================================================================

# Directories are created world-writable (subject to umask)
GOLDEN_DIR_MODE = 0o777
GOLDEN_FILE_MODE = 0o777

# =============================================================================
# Configuration
# =============================================================================

DEFAULT_CONFIG_FILENAME = "golden.yaml"
CONFIG_SECTION = "golden"

ENV_UPDATE = "GOLDEN_UPDATE"
ENV_ALLOW_CI_UPDATE = "GOLDEN_ALLOW_CI_UPDATE"
ENV_NO_COLOR = "NO_COLOR"

CI_INDICATORS = (
    "CI",
    "GITHUB_ACTIONS",
    "GITLAB_CI",
    "JENKINS_URL",
    "CIRCLECI",
    "TRAVIS",
    "BUILDKITE",
    "TF_BUILD",  # Azure Pipelines
    "CODEBUILD_BUILD_ID",  # AWS CodeBuild
)

# Over-normalization thresholds
DEFAULT_UUID_THRESHOLD = 20
DEFAULT_TIMESTAMP_THRESHOLD = 20

# =============================================================================
# Diff
# =============================================================================

# Changed blocks longer than this (either side) are not refined to characters;
# character matching is quadratic in block length
DIFF_CHAR_LIMIT = 2000
