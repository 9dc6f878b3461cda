import pytest

from monadic.json import MonadicJSON, parse
from monadic.testing import monadic_config  # noqa: F401

APPLICATIONS_DOC = (
    '{ "language": "D", "applications": [{"name": "cool programming"}, '
    '{"name": "doing stuff", "examples": [1, 2, 3]}] }'
)
SCALARS_DOC = '{ "nada": null, "bools": [true, false], "float": 10.7 }'


@pytest.fixture()
def applications() -> MonadicJSON:
    return parse(APPLICATIONS_DOC)


@pytest.fixture()
def scalars() -> MonadicJSON:
    return parse(SCALARS_DOC)
