"""
Defines interfaces for all Identity Access Manager (IAM) functionalities.

Role Interface:
1. Create Role (from the trust policy file)
2. Create Service-Linked Role
3. Get Role ARN

Policy Interface:
1. Create Permissions Policy (from the permissions policy file)
2. Attach Permissions Policy to Role
"""
from typing import Protocol

class IAMRoleInterface(Protocol):
    def create_role(self,
                    role_name: str,
                    role_description: str) -> str:
        raise NotImplementedError

    def create_service_linked_role(self,
                                   aws_service_name: str,
                                   custom_suffix: str,
                                   description: str) -> str:
        raise NotImplementedError

    def get_role_arn(self, role_name: str) -> str:
        raise NotImplementedError

class IAMPolicyInterface(Protocol):
    def create_permissions_policy(self, policy_name: str) -> str:
        raise NotImplementedError

    def attach_role_permissions_policy(self,
                                       role_name: str,
                                       permissions_policy_arn: str) -> bool:
        raise NotImplementedError
