"""Pytest configuration for DSRS tests."""
import sys
from pathlib import Path

# Add project root to path so 'dsrs' can be imported without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
