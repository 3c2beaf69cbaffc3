from types import SimpleNamespace

import pulumi

from cognito_google_idp.base import StandardProviderSupport, provider_name_from_id
from cognito_google_idp.user_pool import UserPoolReference


def test_register_identity_provider_is_idempotent():
    user_pool = UserPoolReference("us-east-1_pool")
    provider = SimpleNamespace(provider_name="Google")

    user_pool.register_identity_provider(provider)
    user_pool.register_identity_provider(provider)

    assert user_pool.identity_providers == (provider,)
    assert user_pool.provider_names == ["Google"]


def test_from_user_pool_uses_pool_id():
    pool = SimpleNamespace(id="us-east-1_fromPool")
    assert UserPoolReference.from_user_pool(pool).user_pool_id == "us-east-1_fromPool"


def test_provider_name_from_id():
    assert provider_name_from_id("us-east-1_pool:Google") == "Google"
    assert provider_name_from_id("Google") == "Google"


@pulumi.runtime.test
def test_resource_name_from_ref():
    support = StandardProviderSupport()
    return support.resource_name_from("us-east-1_pool:Google").apply(lambda name: _assert_equal(name, "Google"))


def _assert_equal(actual, expected):
    assert actual == expected
