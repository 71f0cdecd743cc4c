"""
Create the IAM role, service-linked role and permissions policy.
"""
import sys
import os

# Looks at project root directory; used for finding iam_setup
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# We can now import from different directory
from iam_setup.main.iam_main import main

if __name__ == "__main__":
    sys.exit(main())
