"""
Test the provisioning entry point end to end with moto and Python's unittest
"""
import boto3
from iam_setup.main.iam_main import main
from iam_setup.utils.constants import ROLE_NAME, PERMISSIONS_POLICY_NAME
import unittest
from unittest.mock import patch
from moto import mock_aws
import os

class IAMMainTest(unittest.TestCase):
    def setUp(self):
        """Fake credentials for the script to pick up
        """
        self.mock = mock_aws()
        self.mock.start()

        self.env = patch.dict(os.environ, {'AWS_ACCESS_KEY_ID': 'testing',
                                           'AWS_SECRET_ACCESS_KEY': 'testing'})
        self.env.start()
        self.client = boto3.client('iam', region_name='us-east-1')

    def tearDown(self):
        """Clean up test resources
        """
        self.env.stop()
        self.mock.stop()

    def test_main(self):
        """All resources exist and the policy is attached once
        """
        self.assertEqual(main(), 0)

        role = self.client.get_role(RoleName=ROLE_NAME)['Role']
        attached = self.client.list_attached_role_policies(RoleName=ROLE_NAME)['AttachedPolicies']
        self.assertEqual([policy['PolicyName'] for policy in attached], [PERMISSIONS_POLICY_NAME])
        self.assertTrue(role['Arn'].endswith(f'role/{ROLE_NAME}'))

        service_roles = [r for r in self.client.list_roles()['Roles'] if r['Path'].startswith('/aws-service-role/')]
        self.assertEqual(len(service_roles), 1)

    def test_main_rerun_fails(self):
        """A second run stops at the role that already exists
        """
        self.assertEqual(main(), 0)
        self.assertEqual(main(), 1)

    def test_main_missing_credentials(self):
        """Nothing is created without credentials in the environment
        """
        del os.environ['AWS_SECRET_ACCESS_KEY']
        self.assertEqual(main(), 1)
        self.assertEqual(self.client.list_roles()['Roles'], [])

if __name__ == '__main__':
    unittest.main()
