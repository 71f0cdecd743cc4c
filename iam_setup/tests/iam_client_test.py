"""
Test authenticate_iam with moto and Python's unittest
"""
from iam_setup.clients.iam_client import authenticate_iam
from iam_setup.managers.iam_manager import IAMRoleManager
import unittest
from unittest.mock import patch, MagicMock
from moto import mock_aws

class AuthenticateIAMTest(unittest.TestCase):
    @patch('iam_setup.clients.iam_client.boto3.client')
    def test_region_and_credentials(self, mock_client):
        """The region and static credentials are handed to boto3
        """
        mock_client.return_value = MagicMock()
        client = authenticate_iam('AKIDEXAMPLE', 'secret', 'eu-west-1', session_token='token')

        self.assertIs(client, mock_client.return_value)
        mock_client.assert_called_once_with('iam',
                                            aws_access_key_id='AKIDEXAMPLE',
                                            aws_secret_access_key='secret',
                                            aws_session_token='token',
                                            region_name='eu-west-1')

    @patch('iam_setup.clients.iam_client.boto3.client')
    def test_without_session_token(self, mock_client):
        """Long-lived keys are passed without a session token
        """
        authenticate_iam('AKIDEXAMPLE', 'secret', 'us-east-1')

        _, kwargs = mock_client.call_args
        self.assertIsNone(kwargs['aws_session_token'])
        self.assertEqual(kwargs['region_name'], 'us-east-1')

    @mock_aws
    def test_client_drives_manager(self):
        """An authenticated client can be handed to the managers
        """
        client = authenticate_iam('testing', 'testing', 'us-east-1')
        self.assertEqual(client.meta.service_model.service_name, 'iam')

        arn = IAMRoleManager(client).create_role('DatabaseManagerRole', 'role for unit tests')
        self.assertTrue(arn.endswith(':role/DatabaseManagerRole'))

if __name__ == '__main__':
    unittest.main()
