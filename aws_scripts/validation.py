"""
Run all IAM unit tests
- IAM client
- IAM roles and policies

Designed to be run by the CLI
"""
import unittest
import sys
import os

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# Looks at project root directory; used for finding iam_setup/tests
sys.path.append(PROJECT_ROOT)

if __name__ == "__main__":
    loader = unittest.TestLoader()
    suite = loader.discover(start_dir=os.path.join(PROJECT_ROOT, "iam_setup", "tests"), pattern="*_test.py")
    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)
    sys.exit(0 if result.wasSuccessful() else 1)
