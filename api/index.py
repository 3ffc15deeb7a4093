"""Vercel serverless entry point for the stylecascade API."""
import os
import sys

# Add src to path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from stylecascade.config import CascadeConfig
from stylecascade.web.app import create_app

app = create_app(CascadeConfig.from_env())
