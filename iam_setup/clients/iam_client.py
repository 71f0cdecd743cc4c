"""
Builds the IAM client shared by the managers.
"""
import boto3
from botocore.client import BaseClient
from iam_setup.utils.logger import logger
from typing import Optional

def authenticate_iam(access_key_id: str,
                     secret_access_key: str,
                     region: str,
                     session_token: Optional[str] = None) -> BaseClient:
    """Authenticate to IAM with the AWS user's credentials
    Docs:
        https://boto3.amazonaws.com/v1/documentation/api/latest/guide/credentials.html#passing-credentials-as-parameters
    Args:
        access_key_id: the AWS Access Key ID used to sign requests
        secret_access_key: the AWS Secret Access Key used to sign requests
        region: the AWS Region the client talks to
        session_token: only needed for temporary credentials
    Return:
        the IAM service client
    """
    client = boto3.client('iam',
                          aws_access_key_id=access_key_id,
                          aws_secret_access_key=secret_access_key,
                          aws_session_token=session_token,
                          region_name=region)
    logger.info(f'[SUCCESS] created IAM client for region "{region}"')
    return client
