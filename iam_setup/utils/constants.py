"""
Names used when provisioning the IAM resources for the database manager bot.
"""
import os

REGION = os.environ.get('AWS_REGION', 'us-east-1')

ROLE_NAME = 'DatabaseManagerRole'
ROLE_DESCRIPTION = 'Role assumed by the database manager Lex bot and its fulfillment Lambda'

# Lex V2 only accepts a custom suffix on its service-linked role
SERVICE_LINKED_ROLE_SERVICE = 'lexv2.amazonaws.com'
SERVICE_LINKED_ROLE_SUFFIX = 'DatabaseManager'
SERVICE_LINKED_ROLE_DESCRIPTION = 'Service-linked role for the database manager Lex V2 bot'

PERMISSIONS_POLICY_NAME = 'DatabaseManagerPermissions'

TRUST_POLICY_FILE = 'trust-policy'
PERMISSIONS_POLICY_FILE = 'permissions-policy'
