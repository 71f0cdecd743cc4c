"""
Implements all IAM functionalities.
"""
from iam_setup.utils.logger import logger
from iam_setup.utils.constants import TRUST_POLICY_FILE, PERMISSIONS_POLICY_FILE
from iam_setup.interfaces.iam_interface import IAMRoleInterface, IAMPolicyInterface
from botocore.exceptions import ClientError, WaiterError
from botocore.client import BaseClient
from typing import Dict, Optional
import json
import os

# Packaged trust/permissions policy documents
DEFAULT_POLICIES_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'policies')

def _read_json_file(folder: str, filename: str) -> str:
    """Reads a policy document and returns it as a compact JSON string
    Args:
        folder: the directory holding the JSON files
        filename: the file name, without the .json extension
    Return:
        the parsed document serialized back to JSON
    Raises:
        OSError if the file cannot be read, ValueError if it is not valid UTF-8 JSON
    """
    path = os.path.join(folder, f'{filename}.json')
    with open(path, 'r', encoding='utf-8') as f:
        document = json.load(f)
    return json.dumps(document)

def _waiter_config(delay: Optional[int], max_attempts: Optional[int]) -> Dict[str, int]:
    """Builds the WaiterConfig argument; unset values fall back to the SDK defaults"""
    config = {}
    if delay is not None:
        config['Delay'] = delay
    if max_attempts is not None:
        config['MaxAttempts'] = max_attempts
    return config

class IAMRoleManager(IAMRoleInterface):
    def __init__(self,
                 iam_client: BaseClient,
                 policies_dir: str = DEFAULT_POLICIES_DIR,
                 waiter_delay: Optional[int] = None,
                 waiter_max_attempts: Optional[int] = None):
        """Initialize IAM role resources
        Args:
            iam_client: the IAM client, injectable for unit testing
            policies_dir: the directory holding trust-policy.json
            waiter_delay: seconds between role_exists polls
            waiter_max_attempts: number of role_exists polls before giving up
        """
        self.client = iam_client
        self.policies_dir = policies_dir
        self.waiter_config = _waiter_config(waiter_delay, waiter_max_attempts)

    def _wait_until_role_exists(self, role_name: str) -> None:
        """Blocks until GetRole succeeds for the role
        Docs:
            https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/iam/waiter/RoleExists.html
        """
        waiter = self.client.get_waiter('role_exists')
        waiter.wait(RoleName=role_name, WaiterConfig=self.waiter_config)
        logger.info(f'[INFO] IAM Role "{role_name}" is available')

    def create_role(self,
                    role_name: str,
                    role_description: str) -> str:
        """Creates the IAM role used across the application, trusted per trust-policy.json
        Docs:
            https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/iam/client/create_role.html
        Args:
            role_name: the name of the role
            role_description: the description of the role
        Return:
            The role ARN if creation is successful, otherwise an empty string
        """
        try:
            trust_policy = _read_json_file(self.policies_dir, TRUST_POLICY_FILE)
        except (OSError, ValueError) as e:
            logger.error(f'[FAIL] cannot read trust policy ({e})')
            return ''

        try:
            response = self.client.create_role(RoleName=role_name,
                                               Description=role_description,
                                               AssumeRolePolicyDocument=trust_policy)
            self._wait_until_role_exists(response['Role']['RoleName'])
        except (ClientError, WaiterError) as e:
            logger.error(f'[FAIL] cannot create IAM Role "{role_name}" ({e})')
            return ''

        logger.info(f'[SUCCESS] created IAM Role "{role_name}"')
        return response['Role']['Arn']

    def create_service_linked_role(self,
                                   aws_service_name: str,
                                   custom_suffix: str,
                                   description: str) -> str:
        """Creates a service-linked role, e.g. for Lex V2
        Docs:
            https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/iam/client/create_service_linked_role.html
        Args:
            aws_service_name: the service principal the role is attached to (e.g. lexv2.amazonaws.com)
            custom_suffix: combined with the service-provided prefix to form the role name
            description: the description of the role
        Return:
            The service-linked role ARN if creation is successful, otherwise an empty string
        """
        try:
            response = self.client.create_service_linked_role(AWSServiceName=aws_service_name,
                                                              CustomSuffix=custom_suffix,
                                                              Description=description)
            self._wait_until_role_exists(response['Role']['RoleName'])
        except (ClientError, WaiterError) as e:
            logger.error(f'[FAIL] cannot create service-linked role for "{aws_service_name}" ({e})')
            return ''

        logger.info(f'[SUCCESS] created service-linked role "{response["Role"]["RoleName"]}"')
        return response['Role']['Arn']

    def get_role_arn(self, role_name: str) -> str:
        """Gets the role ARN
        Docs:
            https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/iam/client/get_role.html
        Args:
            role_name: The name of the role in IAM
        Return:
            The role ARN if retrieval is successful, otherwise the function returns an empty string.
        """
        try:
            response = self.client.get_role(RoleName=role_name)
        except ClientError as e:
            logger.error(f'[FAIL] cannot retrieve the ARN for the IAM Role ({e})')
            return ''

        logger.info(f'[SUCCESS] retrieved and returned the ARN for the IAM Role')
        return response['Role']['Arn']

class IAMPolicyManager(IAMPolicyInterface):
    def __init__(self,
                 iam_client: BaseClient,
                 policies_dir: str = DEFAULT_POLICIES_DIR,
                 waiter_delay: Optional[int] = None,
                 waiter_max_attempts: Optional[int] = None):
        """Initialize IAM policy resources
        Args:
            iam_client: the IAM client, injectable for unit testing
            policies_dir: the directory holding permissions-policy.json
            waiter_delay: seconds between policy_exists polls
            waiter_max_attempts: number of policy_exists polls before giving up
        """
        self.client = iam_client
        self.policies_dir = policies_dir
        self.waiter_config = _waiter_config(waiter_delay, waiter_max_attempts)

    def create_permissions_policy(self, policy_name: str) -> str:
        """Creates a managed permissions policy from permissions-policy.json
        Docs:
            https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/iam/client/create_policy.html
        Args:
            policy_name: the name of the policy
        Return:
            The policy ARN if creation is successful, otherwise an empty string
        """
        try:
            permissions_policy = _read_json_file(self.policies_dir, PERMISSIONS_POLICY_FILE)
        except (OSError, ValueError) as e:
            logger.error(f'[FAIL] cannot read permissions policy ({e})')
            return ''

        try:
            response = self.client.create_policy(PolicyName=policy_name,
                                                 PolicyDocument=permissions_policy)
            policy_arn = response['Policy']['Arn']

            # Wait until the policy is visible
            waiter = self.client.get_waiter('policy_exists')
            waiter.wait(PolicyArn=policy_arn, WaiterConfig=self.waiter_config)
        except (ClientError, WaiterError) as e:
            logger.error(f'[FAIL] cannot create permissions policy "{policy_name}" ({e})')
            return ''

        logger.info(f'[SUCCESS] created permissions policy "{policy_name}"')
        return policy_arn

    def _is_policy_attached(self,
                            role_name: str,
                            permissions_policy_arn: str) -> bool:
        """Check if the policy is already attached to the role
        Docs:
            https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/iam/paginator/ListAttachedRolePolicies.html
        Args:
            role_name: the name of the role
            permissions_policy_arn: the policy ARN to look for
        Return:
            True/False if the policy is attached/not attached
        Raises:
            ClientError if the attachments cannot be listed
        """
        paginator = self.client.get_paginator('list_attached_role_policies')
        for page in paginator.paginate(RoleName=role_name):
            for policy in page['AttachedPolicies']:
                if policy['PolicyArn'] == permissions_policy_arn:
                    return True
        return False

    def attach_role_permissions_policy(self,
                                       role_name: str,
                                       permissions_policy_arn: str) -> bool:
        """Attaches a managed policy to a role, unless it is attached already
        Docs:
            https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/iam/client/attach_role_policy.html
        Args:
            role_name: the name of the role receiving the permissions
            permissions_policy_arn: the ARN of the permissions policy
        Return:
            True if the policy is attached to the role afterwards, False on failure
        """
        try:
            if self._is_policy_attached(role_name, permissions_policy_arn):
                logger.info(f'[SKIP] policy "{permissions_policy_arn}" is already attached to "{role_name}"')
                return True
            self.client.attach_role_policy(RoleName=role_name,
                                           PolicyArn=permissions_policy_arn)
        except ClientError as e:
            logger.error(f'[FAIL] cannot attach policy to IAM Role "{role_name}" ({e})')
            return False
        logger.info(f'[SUCCESS] attached policy "{permissions_policy_arn}" to "{role_name}"')
        return True
