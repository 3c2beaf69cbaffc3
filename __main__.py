import logging

import pulumi
import pulumi_aws as aws

from cognito_google_idp.attributes import AttributeMapping, ProviderAttribute
from cognito_google_idp.config import common_tags, load_settings
from cognito_google_idp.google import (
    UserPoolIdentityProviderGoogle,
    UserPoolIdentityProviderGoogleArgs,
)
from cognito_google_idp.user_pool import UserPoolReference

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

settings = load_settings()
name = f"{settings.project_name}-{settings.environment}"

user_pool = UserPoolReference(settings.user_pool_id)

google = UserPoolIdentityProviderGoogle(
    f"{name}-google",
    UserPoolIdentityProviderGoogleArgs(
        user_pool=user_pool,
        client_id=settings.client_id,
        client_secret_value=settings.client_secret,
        scopes=settings.scopes,
        attribute_mapping=AttributeMapping(
            email=ProviderAttribute.GOOGLE_EMAIL,
            email_verified=ProviderAttribute.GOOGLE_EMAIL_VERIFIED,
            given_name=ProviderAttribute.GOOGLE_GIVEN_NAME,
            family_name=ProviderAttribute.GOOGLE_FAMILY_NAME,
            profile_picture=ProviderAttribute.GOOGLE_PICTURE,
        ),
    ),
)

# Hosted UI client allowed to sign in through the registered providers
client = aws.cognito.UserPoolClient(
    f"{name}-client",
    user_pool_id=user_pool.user_pool_id,
    supported_identity_providers=user_pool.provider_names,
    allowed_oauth_flows=["code"],
    allowed_oauth_flows_user_pool_client=True,
    allowed_oauth_scopes=["openid", "email", "profile"],
    callback_urls=pulumi.Config().get_object("callbackUrls") or ["http://localhost:3000/callback"],
    opts=pulumi.ResourceOptions(depends_on=[google]),
)

pulumi.export("user_pool_id", user_pool.user_pool_id)
pulumi.export("google_provider_name", google.provider_name)
pulumi.export("user_pool_client_id", client.id)
pulumi.export("tags", common_tags(settings))
