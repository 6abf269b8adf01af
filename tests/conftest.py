"""
Pytest fixtures for the golden_files tests.

Test layout:
- unit/: one module per component
- golden/: end-to-end golden comparisons against committed files
"""

import pytest

from golden_files.domain.schemas import CompareOptions

pytest_plugins = ["pytester", "golden_files.pytest_plugin"]

# =============================================================================
# Sample Texts
# =============================================================================

SAMPLE_INPUT = """
{
	"data": {
		"attributes": {
		"createdAt": "2017-04-21T04:38:26.777609Z",
		"last_used_workspace": "my-last-used-workspace",
		"type": "git",
		"url": "https://github.com/fabric8-services/fabric8-wit.git"
		},
		"id": "d7a282f6-1c10-459e-bb44-55a1a6d48bdd",
		"links": {
		"edit": "http:///api/codebases/d7a282f6-1c10-459e-bb44-55a1a6d48bdd/edit",
		"related": "http:///api/codebases/d7a282f6-1c10-459e-bb44-55a1a6d48bdd",
		"self": "http:///api/codebases/d7a282f6-1c10-459e-bb44-55a1a6d48bdd"
		},
		"relationships": {
		"space": {
			"data": {
			"id": "a8bee527-12d2-4aff-9823-3511c1c8e6b9",
			"type": "spaces"
			},
			"links": {
			"related": "http:///api/spaces/a8bee527-12d2-4aff-9823-3511c1c8e6b9",
			"self": "http:///api/spaces/a8bee527-12d2-4aff-9823-3511c1c8e6b9"
			}
		}
		},
		"type": "codebases"
	}
}"""

FIRST_UUID = "d7a282f6-1c10-459e-bb44-55a1a6d48bdd"
SECOND_UUID = "a8bee527-12d2-4aff-9823-3511c1c8e6b9"
CREATED_AT = "2017-04-21T04:38:26.777609Z"


@pytest.fixture
def sample_input() -> str:
    """Codebase JSON:API document with two UUIDs and one RFC3339 time."""
    return SAMPLE_INPUT


@pytest.fixture
def uuid_output() -> str:
    """sample_input with UUIDs replaced."""
    return (
        SAMPLE_INPUT
        .replace(FIRST_UUID, "00000000-0000-0000-0000-000000000001")
        .replace(SECOND_UUID, "00000000-0000-0000-0000-000000000002")
    )


@pytest.fixture
def times_output() -> str:
    """sample_input with times replaced."""
    return SAMPLE_INPUT.replace(CREATED_AT, "0001-01-01T00:00:00Z")


# =============================================================================
# Options Fixtures
# =============================================================================

ALL_OPTIONS = [
    CompareOptions(uuid_agnostic=u, datetime_agnostic=d, marshal_input_as_json=j)
    for u in (True, False)
    for d in (True, False)
    for j in (True, False)
]


@pytest.fixture(params=ALL_OPTIONS, ids=lambda o: f"uuid={o.uuid_agnostic}-dt={o.datetime_agnostic}-json={o.marshal_input_as_json}")
def any_options(request: pytest.FixtureRequest) -> CompareOptions:
    """Every combination of comparison options."""
    return request.param
