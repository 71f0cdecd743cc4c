"""
Provision the IAM resources for the database manager bot.
"""
import sys
import os
from iam_setup.clients.iam_client import authenticate_iam
from iam_setup.managers.iam_manager import IAMRoleManager, IAMPolicyManager
from iam_setup.utils.logger import logger
from iam_setup.utils.constants import (
    REGION,
    ROLE_NAME,
    ROLE_DESCRIPTION,
    SERVICE_LINKED_ROLE_SERVICE,
    SERVICE_LINKED_ROLE_SUFFIX,
    SERVICE_LINKED_ROLE_DESCRIPTION,
    PERMISSIONS_POLICY_NAME,
)

def main() -> int:
    try:
        access_key_id = os.environ['AWS_ACCESS_KEY_ID']
        secret_access_key = os.environ['AWS_SECRET_ACCESS_KEY']
    except KeyError as e:
        logger.error(f'[FAIL] missing credential environment variable {e}')
        return 1

    iam_client = authenticate_iam(access_key_id=access_key_id,
                                  secret_access_key=secret_access_key,
                                  region=REGION,
                                  session_token=os.environ.get('AWS_SESSION_TOKEN'))

    role_manager = IAMRoleManager(iam_client)
    policy_manager = IAMPolicyManager(iam_client)

    # Role used across the application
    role_arn = role_manager.create_role(ROLE_NAME, ROLE_DESCRIPTION)
    if not role_arn:
        return 1

    # Service-linked role for the Lex V2 bot
    service_linked_role_arn = role_manager.create_service_linked_role(SERVICE_LINKED_ROLE_SERVICE,
                                                                      SERVICE_LINKED_ROLE_SUFFIX,
                                                                      SERVICE_LINKED_ROLE_DESCRIPTION)
    if not service_linked_role_arn:
        return 1

    # Permissions policy, attached to the application role
    policy_arn = policy_manager.create_permissions_policy(PERMISSIONS_POLICY_NAME)
    if not policy_arn:
        return 1
    if not policy_manager.attach_role_permissions_policy(ROLE_NAME, policy_arn):
        return 1

    logger.info(f'[SUCCESS] role: {role_arn}')
    logger.info(f'[SUCCESS] service-linked role: {service_linked_role_arn}')
    logger.info(f'[SUCCESS] permissions policy: {policy_arn}')
    return 0

if __name__ == "__main__":
    sys.exit(main())
