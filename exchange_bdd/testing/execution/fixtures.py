"""
Fixtures pytest disponiveis para os steps BDD.

Registrado como plugin pelo BddTestRunner junto com o BddEventBridge.
"""

import pytest

from exchange_bdd.api.context import ApiContext

API_CONTEXT_KEY = pytest.StashKey[ApiContext]()


@pytest.fixture
def api_context(pytestconfig: pytest.Config) -> ApiContext:
    """ApiContext da execucao (host, credenciais e otp)."""
    try:
        return pytestconfig.stash[API_CONTEXT_KEY]
    except KeyError:
        pytest.fail("No exchange API context configured for this run", pytrace=False)
