import os
import sys

# Add path so tests run without installing the package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
