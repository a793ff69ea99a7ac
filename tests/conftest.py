import pytest

from urinexus import Parameter, ParameterCollection, Url, UserInfo


@pytest.fixture
def parameters():
    """Three parameters with distinct names."""
    return [
        Parameter("age", 90),
        Parameter("status", "single"),
        Parameter("city", "Montreal"),
    ]


@pytest.fixture
def collection(parameters):
    """Collection built from the ``parameters`` fixture."""
    return ParameterCollection(parameters)


@pytest.fixture
def full_url():
    """Url with every component set."""
    return Url(
        scheme="https",
        user_info=UserInfo("seb", "engineer"),
        host="www.example.com",
        port=8080,
        path=["api/v1", "place", "alex"],
        parameters=[Parameter("age", 90), Parameter("status", "single")],
        fragment="x",
    )
